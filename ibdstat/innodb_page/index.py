from collections import namedtuple
from ibdstat.innodb_page.page import FIL_PAGE_DATA
from ibdstat.utils.errors import InvalidArgument

# storage/innobase/include/page0types.h
# offsets are relative to PAGE_HEADER (FIL_PAGE_DATA)
PAGE_HEADER = FIL_PAGE_DATA
PAGE_N_DIR_SLOTS = 0  # number of slots in page directory
PAGE_HEAP_TOP = 2     # pointer to record heap top
PAGE_N_HEAP = 4       # number of records in the heap, bit 15=flag: new-style compact page format
PAGE_FREE = 6         # pointer to start of page free record list
PAGE_GARBAGE = 8      # number of bytes in deleted records
PAGE_LAST_INSERT = 10 # pointer to the last inserted record, or 0
PAGE_DIRECTION = 12   # last insert direction
PAGE_N_DIRECTION = 14 # number of consecutive inserts to the same direction
PAGE_N_RECS = 16      # number of user records on the page
PAGE_MAX_TRX_ID = 18  # only defined in secondary indexes and in the insert buffer tree
PAGE_LEVEL = 26       # level of the node in an index tree; the leaf level is the level 0
PAGE_INDEX_ID = 28    # index id where the page belongs
PAGE_BTR_SEG_LEAF = 36 # file segment header for the leaf pages, only on the root page
PAGE_BTR_SEG_TOP = 46  # file segment header for the non-leaf pages, only on the root page

FSEG_HEADER_SIZE = 10
PAGE_N_HEAP_COMPACT = 0x8000

PAGE_LEFT = 1
PAGE_RIGHT = 2
PAGE_SAME_REC = 3
PAGE_SAME_PAGE = 4
PAGE_NO_DIRECTION = 5

DIRECTION_NAME = {
	PAGE_LEFT:'Page Left',
	PAGE_RIGHT:'Page Right',
	PAGE_SAME_REC:'Page Same Rec',
	PAGE_SAME_PAGE:'Page Same Page',
	PAGE_NO_DIRECTION:'Page No Direction',
}

SEGMENT_KIND = {
	'leaf':PAGE_BTR_SEG_LEAF,
	'top':PAGE_BTR_SEG_TOP,
}

SEGMENT_HEADER = namedtuple('SEGMENT_HEADER',['space_id','page_no','offset'])


class INDEX_HEADER(object):
	"""
	INPUT:
		store: PAGE_STORE

	B-tree page header, 36 bytes after the FIL header plus two segment headers.
	every accessor takes the 1-based page number.
	"""
	def __init__(self,store):
		self.store = store

	def _read(self,pageno,offset,size):
		return self.store.read_uint(pageno,PAGE_HEADER+offset,size)

	def n_dir_slots(self,pageno):
		return self._read(pageno,PAGE_N_DIR_SLOTS,2)

	def heap_top(self,pageno):
		return self._read(pageno,PAGE_HEAP_TOP,2)

	def _n_heap_raw(self,pageno):
		return self._read(pageno,PAGE_N_HEAP,2)

	def n_heap(self,pageno):
		# includes infimum/supremum and delete-marked records
		return self._n_heap_raw(pageno) & (PAGE_N_HEAP_COMPACT-1)

	def is_compact(self,pageno):
		return (self._n_heap_raw(pageno) & PAGE_N_HEAP_COMPACT) != 0

	def row_format(self,pageno):
		return 'COMPACT' if self.is_compact(pageno) else 'REDUNDANT'

	def free(self,pageno):
		return self._read(pageno,PAGE_FREE,2)

	def garbage(self,pageno):
		return self._read(pageno,PAGE_GARBAGE,2)

	def last_insert(self,pageno):
		return self._read(pageno,PAGE_LAST_INSERT,2)

	def direction(self,pageno):
		return self._read(pageno,PAGE_DIRECTION,2)

	def n_direction(self,pageno):
		return self._read(pageno,PAGE_N_DIRECTION,2)

	def n_recs(self,pageno):
		return self._read(pageno,PAGE_N_RECS,2)

	def max_trx_id(self,pageno):
		# 0 on clustered index pages
		return self._read(pageno,PAGE_MAX_TRX_ID,8)

	def level(self,pageno):
		return self._read(pageno,PAGE_LEVEL,2)

	def index_id(self,pageno):
		return self._read(pageno,PAGE_INDEX_ID,8)

	def segment_header(self,pageno,kind):
		"""
		INPUT:
			kind: 'leaf' or 'top'
		RETURN:
			SEGMENT_HEADER(space_id,page_no,offset) or None if not a root page
		"""
		if kind not in SEGMENT_KIND:
			raise InvalidArgument(f"INDEX_HEADER.segment_header(): [invalid segment kind {kind!r}]")
		base = SEGMENT_KIND[kind]
		offset = self._read(pageno,base+8,2)
		if offset == 0:
			return None
		return SEGMENT_HEADER(
			self._read(pageno,base,4),
			self._read(pageno,base+4,4),
			offset
		)

	def get_all(self,pageno):
		direction = self.direction(pageno)
		return {
			'PAGE_N_DIR_SLOTS':self.n_dir_slots(pageno),
			'PAGE_HEAP_TOP':self.heap_top(pageno),
			'PAGE_N_HEAP':self.n_heap(pageno),
			'ROW_FORMAT':self.row_format(pageno),
			'PAGE_FREE':self.free(pageno),
			'PAGE_GARBAGE':self.garbage(pageno),
			'PAGE_LAST_INSERT':self.last_insert(pageno),
			'PAGE_DIRECTION':direction,
			'PAGE_DIRECTION_NAME':DIRECTION_NAME.get(direction,''),
			'PAGE_N_DIRECTION':self.n_direction(pageno),
			'PAGE_N_RECS':self.n_recs(pageno),
			'PAGE_MAX_TRX_ID':self.max_trx_id(pageno),
			'PAGE_LEVEL':self.level(pageno),
			'PAGE_INDEX_ID':self.index_id(pageno),
			'PAGE_BTR_SEG_LEAF':self.segment_header(pageno,'leaf'),
			'PAGE_BTR_SEG_TOP':self.segment_header(pageno,'top'),
		}
