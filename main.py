#!/usr/bin/env python3
# ibdstat: page type / index / level statistics of an ibd file

from ibdstat.ibdstat import SCAN_TABLESPACE
from ibdstat.ibdstat import DUMP_PAGE
from ibdstat.ibdstat import DUMP_INDEX_HEADERS
from ibdstat.innodb_page.page import PAGE_SIZE
from ibdstat.report import FORMAT_STATS
from ibdstat.report import FORMAT_PAGE
from ibdstat.report import FORMAT_JSON
from ibdstat.utils.errors import IbdstatError
from ibdstat.utils.log import LOG
import argparse
import glob
import sys
import os

VERSION = 'ibdstat v1.0'

def print_error_and_exit(msg,exit_code=1):
	msg += "\n"
	sys.stdout.write(msg)
	sys.exit(exit_code)

def _argparse(args=None):
	parser = argparse.ArgumentParser(add_help=False,description="page type, index and level statistics of a mysql ibd file")
	parser.add_argument(
		"--help", "-h", "-H",
		action="store_true",
		dest="HELP",
		default=False,
		help="show help"
	)
	parser.add_argument(
		"--version", "-v", "-V",
		action="store_true",
		dest="VERSION",
		default=False,
		help="show version"
	)
	parser.add_argument(
		"--page",
		type=int,
		action='append',
		dest="PAGE_NO",
		help="print FIL/INDEX header of this page (starts at 1), can be repeated"
	)
	parser.add_argument(
		"--index-header",
		action="store_true",
		dest="INDEX_HEADER",
		default=False,
		help="print header of every btree page"
	)
	parser.add_argument(
		"--json",
		action="store_true",
		dest="JSON",
		default=False,
		help="print json instead of text"
	)
	parser.add_argument(
		"--log",
		nargs='?',
		const=True,
		dest="LOG_FILE",
		help="log file, stderr if no value"
	)
	# page-size:         page size, default 16384
	# exclude-last-page: do not count the last page of the file
	parser.add_argument(
		"--set",
		dest="SET_OPTIONS",
		action='append',
		help="set some options:page-size,exclude-last-page\n example:--set='page-size=16384;exclude-last-page'"
	)
	parser.add_argument(dest='FILENAME', help='ibd filename or dirname with ibd file', nargs='*')

	parser_args = parser.parse_args(args)
	if parser_args.VERSION:
		print(VERSION)
		sys.exit(0)

	if parser_args.HELP or parser_args.FILENAME == []:
		parser.print_help()
		sys.exit(0)

	return parser_args

def PARSE_SET_OPTIONS(set_options):
	"""
	--set="a=1,b=2" --set 'c=3;d=4' --set 'a=5'
	RETURN: {'a':'5','b':'2','c':'3','d':'4'}, bare names are True
	"""
	opt = {}
	if set_options is None:
		return opt
	for x in set_options:
		for y in x.split(';'):
			for z in y.split(','):
				kv = z.split('=')
				if len(kv) == 2:
					opt[kv[0]] = kv[1]
				elif len(kv) == 1 and z != '':
					opt[kv[0]] = True
	return opt

def INIT_FILENAME(filenames,log):
	filename_list = []
	for x in filenames:
		matched = glob.glob(x)
		if len(matched) == 0:
			log.warning('file',x,'not exists. [skip it]')
		for filename in matched:
			if os.path.isfile(filename):
				filename_list.append(filename)
			elif os.path.isdir(filename):
				for n in sorted(os.listdir(filename)):
					nfilename = os.path.join(filename,n)
					if os.path.isfile(nfilename):
						filename_list.append(nfilename)
	return filename_list

def RUN(parser,out=sys.stdout):
	"""RETURN: exit code, 1 if any file faild"""
	opt = PARSE_SET_OPTIONS(parser.SET_OPTIONS)
	try:
		log = LOG(parser.LOG_FILE)
	except OSError as e:
		print_error_and_exit(f"can not open log file {parser.LOG_FILE}: {e}")
	log.info('SET:',opt)
	try:
		page_size = int(opt['page-size']) if 'page-size' in opt and opt['page-size'] is not True else PAGE_SIZE
	except ValueError:
		print_error_and_exit(f"invalid page-size {opt['page-size']}")
	exclude_last_page = 'exclude-last-page' in opt

	filename_list = INIT_FILENAME(parser.FILENAME,log)
	if len(filename_list) == 0:
		print_error_and_exit(f"{' '.join(parser.FILENAME)} not exists")

	exit_code = 0
	for filename in filename_list:
		log.info('FILENAME',filename)
		try:
			if parser.PAGE_NO:
				result = [ DUMP_PAGE(filename,pageno,page_size) for pageno in parser.PAGE_NO ]
				text = ''.join([ FORMAT_PAGE(x) for x in result ])
			elif parser.INDEX_HEADER:
				result = DUMP_INDEX_HEADERS(filename,log,page_size)
				text = ''.join([ FORMAT_PAGE(x) for x in result ])
			else:
				stats,page_type_stats,index_stats = SCAN_TABLESPACE(filename,log,page_size,exclude_last_page)
				result = {'filename':filename,'stats':stats,'page_type_stats':page_type_stats,'index_stats':index_stats}
				text = FORMAT_STATS(filename,stats,page_type_stats,index_stats)
		except IbdstatError as e:
			out.write(f"{filename}: {e}\n")
			exit_code = 1
			continue
		out.write((FORMAT_JSON(result) if parser.JSON else text) + "\n")
	log.close()
	return exit_code

if __name__ == '__main__':
	sys.exit(RUN(_argparse()))
