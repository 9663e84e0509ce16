#mysql storage/innobase/include/fil0fil.h
from types import MappingProxyType

#/** File page types (values of FIL_PAGE_TYPE) @{ */
#/** B-tree node */
FIL_PAGE_INDEX = 17855

#/** R-tree node */
FIL_PAGE_RTREE = 17854

#/** Freshly allocated page */
FIL_PAGE_TYPE_ALLOCATED = 0

#/** Undo log page */
FIL_PAGE_UNDO_LOG = 2

#/** Index node */
FIL_PAGE_INODE = 3

#/** Insert buffer free list */
FIL_PAGE_IBUF_FREE_LIST = 4

#/** Insert buffer bitmap */
FIL_PAGE_IBUF_BITMAP = 5

#/** System page */
FIL_PAGE_TYPE_SYS = 6

#/** Transaction system data */
FIL_PAGE_TYPE_TRX_SYS = 7

#/** File space header */
FIL_PAGE_TYPE_FSP_HDR = 8

#/** Extent descriptor page */
FIL_PAGE_TYPE_XDES = 9

#/** Uncompressed BLOB page */
FIL_PAGE_TYPE_BLOB = 10

#/** First compressed BLOB page */
FIL_PAGE_TYPE_ZBLOB = 11

#/** Subsequent compressed BLOB page */
FIL_PAGE_TYPE_ZBLOB2 = 12

#/** In old tablespaces, garbage in FIL_PAGE_TYPE is replaced with
#this value when flushing pages. */
FIL_PAGE_TYPE_UNKNOWN = 13

#/** Compressed page */
FIL_PAGE_COMPRESSED = 14

#/** Encrypted page */
FIL_PAGE_ENCRYPTED = 15

#/** Compressed and Encrypted page */
FIL_PAGE_COMPRESSED_AND_ENCRYPTED = 16

#/** Encrypted R-tree page */
FIL_PAGE_ENCRYPTED_RTREE = 17

# returned for codes not listed below
UNKNOWN_PAGE_TYPE_NAME = ''

PAGE_TYPE_NAME = MappingProxyType({
	FIL_PAGE_TYPE_ALLOCATED: 'Freshly Allocated',
	FIL_PAGE_UNDO_LOG: 'Undo Log',
	FIL_PAGE_INODE: 'Inode',
	FIL_PAGE_IBUF_FREE_LIST: 'Change Buffer Free List',
	FIL_PAGE_IBUF_BITMAP: 'Change Buffer Bitmap',
	FIL_PAGE_TYPE_SYS: 'System Page',
	FIL_PAGE_TYPE_TRX_SYS: 'Transaction Page',
	FIL_PAGE_TYPE_FSP_HDR: 'File Space Header',
	FIL_PAGE_TYPE_XDES: 'Extent Descriptor',
	FIL_PAGE_TYPE_BLOB: 'Uncompressed Blob Page',
	FIL_PAGE_TYPE_ZBLOB: 'First Compressed Blob',
	FIL_PAGE_TYPE_ZBLOB2: 'Subsequent Compressed Blob',
	FIL_PAGE_TYPE_UNKNOWN: 'Unknown Page',
	FIL_PAGE_COMPRESSED: 'Compressed Page',
	FIL_PAGE_ENCRYPTED: 'Encrypted Page',
	FIL_PAGE_COMPRESSED_AND_ENCRYPTED: 'Compressed And Encrypted Page',
	FIL_PAGE_ENCRYPTED_RTREE: 'Encrypted RTree Page',
	FIL_PAGE_RTREE: 'RTree Page',
	FIL_PAGE_INDEX: 'BTree Page',
})

def GET_PAGE_TYPE_NAME(page_type):
	return PAGE_TYPE_NAME.get(page_type,UNKNOWN_PAGE_TYPE_NAME)
