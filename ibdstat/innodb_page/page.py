import os
import struct
from ibdstat.page_type import FIL_PAGE_INDEX
from ibdstat.utils.errors import InvalidArgument
from ibdstat.utils.errors import PageIOError

PAGE_SIZE = 16384

# FIL HEADER 0:38
FIL_PAGE_SPACE_OR_CHKSUM = 0
FIL_PAGE_OFFSET = 4
FIL_PAGE_PREV = 8
FIL_PAGE_NEXT = 12
FIL_PAGE_LSN = 16
FIL_PAGE_TYPE = 24
FIL_PAGE_FILE_FLUSH_LSN = 26
FIL_PAGE_SPACE_ID = 34
FIL_PAGE_DATA = 38 # start of the data on the page

FIL_NULL = 4294967295

# name, offset, size
FIL_HEADER_FIELDS = (
	('FIL_PAGE_SPACE_OR_CHKSUM',FIL_PAGE_SPACE_OR_CHKSUM,4),
	('FIL_PAGE_OFFSET',FIL_PAGE_OFFSET,4),
	('FIL_PAGE_PREV',FIL_PAGE_PREV,4),
	('FIL_PAGE_NEXT',FIL_PAGE_NEXT,4),
	('FIL_PAGE_LSN',FIL_PAGE_LSN,8),
	('FIL_PAGE_TYPE',FIL_PAGE_TYPE,2),
	('FIL_PAGE_FILE_FLUSH_LSN',FIL_PAGE_FILE_FLUSH_LSN,8),
	('FIL_PAGE_SPACE_ID',FIL_PAGE_SPACE_ID,4),
)

# Format Big Unsigned Int 2/4/8 bytes
_F_B_U_INT = {
	2:struct.Struct('>H'),
	4:struct.Struct('>L'),
	8:struct.Struct('>Q'),
}


class PAGE_STORE(object):
	"""
	INPUT:
		filename: ibd filename
		page_size: default 16384

	USAGE:
		read_uint(pageno,offset,size): unsigned big-endian int, pageno starts at 1
		page_count(): number of whole pages in the file, a trailing partial page is not addressable

	the file is opened on the first read and stays open until close().
	pageno is passed to every read, there is no current page.
	one store must not be shared by concurrent scans (seek+read on one handle).
	"""
	def __init__(self,filename,page_size=PAGE_SIZE):
		if page_size <= 0:
			raise InvalidArgument(f"PAGE_STORE(): [invalid page size {page_size}]")
		self.filename = filename.strip()
		self._page_size = page_size
		self._page_count = None
		self.f = None

	@property
	def PAGE_SIZE(self):
		return self._page_size

	def __enter__(self):
		return self

	def __exit__(self,*args):
		self.close()

	def close(self):
		if self.f is not None:
			self.f.close()
			self.f = None

	def _open(self):
		if self.f is None:
			try:
				self.f = open(self.filename,'rb')
			except OSError as e:
				raise PageIOError(f"PAGE_STORE._open(): [{e}]") from e
		return self.f

	def file_size(self):
		try:
			return os.path.getsize(self.filename)
		except OSError as e:
			raise PageIOError(f"PAGE_STORE.file_size(): [{e}]") from e

	def page_count(self):
		# cached, the page size never changes
		if self._page_count is None:
			size = self.file_size()
			if size <= 0:
				raise InvalidArgument(f"PAGE_STORE.page_count(): [file size is zero: {self.filename}]")
			self._page_count = size//self.PAGE_SIZE
		return self._page_count

	def offset(self,pageno,field_offset,size=0):
		if pageno < 1:
			raise InvalidArgument(f"PAGE_STORE.offset(): [invalid page no {pageno}]")
		if field_offset < 0 or field_offset >= self.PAGE_SIZE or field_offset + size > self.PAGE_SIZE:
			raise InvalidArgument(f"PAGE_STORE.offset(): [invalid offset {field_offset} size {size}]")
		if pageno > self.page_count():
			raise InvalidArgument(f"PAGE_STORE.offset(): [page no {pageno} beyond last page {self.page_count()}]")
		return (pageno-1)*self.PAGE_SIZE + field_offset

	def read_uint(self,pageno,field_offset,size):
		if size not in _F_B_U_INT:
			raise InvalidArgument(f"PAGE_STORE.read_uint(): [unsupport size {size}]")
		offset = self.offset(pageno,field_offset,size)
		f = self._open()
		try:
			f.seek(offset,0)
			data = f.read(size)
		except OSError as e:
			raise PageIOError(f"PAGE_STORE.read_uint(): [{e}]") from e
		if len(data) != size:
			raise PageIOError(f"PAGE_STORE.read_uint(): [short read at {offset}, want {size} got {len(data)}]")
		return _F_B_U_INT[size].unpack(data)[0]


class FIL_HEADER(object):
	def __init__(self,store):
		self.store = store

	def _read(self,pageno,offset,size):
		return self.store.read_uint(pageno,offset,size)

	def checksum(self,pageno):
		return self._read(pageno,FIL_PAGE_SPACE_OR_CHKSUM,4)

	def page_no(self,pageno):
		# as stored, 0-based
		return self._read(pageno,FIL_PAGE_OFFSET,4)

	def prev(self,pageno):
		return self._read(pageno,FIL_PAGE_PREV,4)

	def next(self,pageno):
		return self._read(pageno,FIL_PAGE_NEXT,4)

	def lsn(self,pageno):
		return self._read(pageno,FIL_PAGE_LSN,8)

	def page_type(self,pageno):
		return self._read(pageno,FIL_PAGE_TYPE,2)

	def flush_lsn(self,pageno):
		return self._read(pageno,FIL_PAGE_FILE_FLUSH_LSN,8)

	def space_id(self,pageno):
		return self._read(pageno,FIL_PAGE_SPACE_ID,4)

	def is_index(self,pageno):
		return self.page_type(pageno) == FIL_PAGE_INDEX

	def get_all(self,pageno):
		data = {}
		for name,offset,size in FIL_HEADER_FIELDS:
			data[name] = self._read(pageno,offset,size)
		for name in ('FIL_PAGE_PREV','FIL_PAGE_NEXT'):
			if data[name] == FIL_NULL:
				data[name] = None
		return data
