from ibdstat.innodb_page.page import PAGE_SIZE
from ibdstat.innodb_page.page import PAGE_STORE
from ibdstat.innodb_page.page import FIL_HEADER
from ibdstat.innodb_page.index import INDEX_HEADER
from ibdstat.page_type import FIL_PAGE_INDEX
from ibdstat.page_type import GET_PAGE_TYPE_NAME
from ibdstat.utils.errors import IbdstatError
from ibdstat.utils.errors import WRAP_ERROR
from ibdstat.utils.log import LOG

PAGE_TYPE_PREFIX = 'page_type_'

def SCAN_TABLESPACE(filename,log=None,page_size=PAGE_SIZE,exclude_last_page=False):
	"""
	INPUT:
		filename: ibd filename
		log: LOG, optional
		page_size: default 16384
		exclude_last_page: stop at page_count-1 (old behaviour)

	RETURN:
		stats: {'space_id','total_page','scanned_page','index_page','page_size'}
		page_type_stats: {page_type: count}
		index_stats: {index_id: {'level_<N>_page': count, 'page_type_<N>': count}}

	any error aborts the scan, nothing is returned then.
	"""
	log = LOG() if log is None else log
	pageno = None
	field = 'FILE_SIZE'
	try:
		with PAGE_STORE(filename,page_size) as store:
			fil = FIL_HEADER(store)
			idx = INDEX_HEADER(store)
			page_count = store.page_count()
			if store.file_size()%store.PAGE_SIZE != 0:
				log.warning(filename,'maybe have been damaged, size is not a multiple of',store.PAGE_SIZE)
			log.info(filename,'page count',page_count)

			# no whole page, nothing to read the space id from
			space_id = 0
			if page_count >= 1:
				pageno = 1
				field = 'FIL_PAGE_SPACE_ID'
				space_id = fil.space_id(pageno)
			log.info(filename,'space id',space_id)

			last_pageno = page_count - 1 if exclude_last_page else page_count
			stats = {
				'space_id':space_id,
				'total_page':page_count,
				'scanned_page':0,
				'index_page':0,
				'page_size':store.PAGE_SIZE,
			}
			page_type_stats = {}
			index_stats = {}
			for pageno in range(1,last_pageno+1):
				field = 'FIL_PAGE_TYPE'
				page_type = fil.page_type(pageno)
				page_type_stats[page_type] = page_type_stats.get(page_type,0) + 1
				stats['scanned_page'] += 1
				if page_type != FIL_PAGE_INDEX:
					continue
				stats['index_page'] += 1

				field = 'PAGE_INDEX_ID'
				index_id = idx.index_id(pageno)
				if index_id <= 0:
					continue
				if index_id not in index_stats:
					index_stats[index_id] = {}
				index = index_stats[index_id]

				field = 'PAGE_LEVEL'
				level_key = f'level_{idx.level(pageno)}_page'
				index[level_key] = index.get(level_key,0) + 1

				type_key = f'{PAGE_TYPE_PREFIX}{page_type}'
				index[type_key] = index.get(type_key,0) + 1
	except IbdstatError as e:
		log.error(filename,'scan faild at page',pageno,field,e)
		raise WRAP_ERROR(e,'SCAN_TABLESPACE()',pageno,field) from e
	log.info(filename,'scanned',stats['scanned_page'],'pages,',len(index_stats),'indexes')
	return stats,page_type_stats,index_stats


def _dump_page(fil,idx,pageno):
	fil_header = fil.get_all(pageno)
	page_type = fil_header['FIL_PAGE_TYPE']
	return {
		'PAGE_NO':pageno,
		'FIL_HEADER':fil_header,
		'PAGE_TYPE_NAME':GET_PAGE_TYPE_NAME(page_type),
		'INDEX_HEADER':idx.get_all(pageno) if page_type == FIL_PAGE_INDEX else None,
	}


def DUMP_PAGE(filename,pageno,page_size=PAGE_SIZE):
	"""
	RETURN:
		{'PAGE_NO','FIL_HEADER','PAGE_TYPE_NAME','INDEX_HEADER'}
		INDEX_HEADER is None if the page is not a B-tree page
	"""
	try:
		with PAGE_STORE(filename,page_size) as store:
			return _dump_page(FIL_HEADER(store),INDEX_HEADER(store),pageno)
	except IbdstatError as e:
		raise WRAP_ERROR(e,'DUMP_PAGE()',pageno) from e


def DUMP_INDEX_HEADERS(filename,log=None,page_size=PAGE_SIZE):
	"""headers of every B-tree page, in file order"""
	log = LOG() if log is None else log
	pageno = None
	pages = []
	try:
		with PAGE_STORE(filename,page_size) as store:
			fil = FIL_HEADER(store)
			idx = INDEX_HEADER(store)
			page_count = store.page_count()
			log.info(filename,'page count',page_count)
			for pageno in range(1,page_count+1):
				if fil.is_index(pageno):
					pages.append(_dump_page(fil,idx,pageno))
	except IbdstatError as e:
		log.error(filename,'dump faild at page',pageno,e)
		raise WRAP_ERROR(e,'DUMP_INDEX_HEADERS()',pageno) from e
	log.info(filename,'index pages',len(pages))
	return pages
