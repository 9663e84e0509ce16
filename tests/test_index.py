import pytest
from ibdstat.innodb_page.page import PAGE_STORE
from ibdstat.innodb_page.index import INDEX_HEADER
from ibdstat.innodb_page.index import SEGMENT_HEADER
from ibdstat.innodb_page.index import DIRECTION_NAME
from ibdstat.utils.errors import InvalidArgument
from ibdstat.utils.errors import PageIOError
from gen_page import gen_index_page


@pytest.fixture
def idx(sample_ibd):
	with PAGE_STORE(sample_ibd) as store:
		yield INDEX_HEADER(store)


def test_n_heap_masks_format_bit(idx):
	assert idx.n_heap(4) == 5
	assert idx.is_compact(4)
	assert idx.row_format(4) == 'COMPACT'


def test_n_heap_redundant(ibd_file):
	with PAGE_STORE(ibd_file([gen_index_page(1,9,n_heap=5)])) as store:
		idx = INDEX_HEADER(store)
		assert idx.n_heap(1) == 5
		assert not idx.is_compact(1)
		assert idx.row_format(1) == 'REDUNDANT'


def test_fields(ibd_file):
	page = gen_index_page(1,0x0102030405060708,3,
		n_dir_slots=2,heap_top=120,n_heap=0x8004,free=130,garbage=26,last_insert=125,
		direction=2,n_direction=7,n_recs=1,max_trx_id=0x1122334455667788)
	with PAGE_STORE(ibd_file([page])) as store:
		idx = INDEX_HEADER(store)
		assert idx.n_dir_slots(1) == 2
		assert idx.heap_top(1) == 120
		assert idx.n_heap(1) == 4
		assert idx.free(1) == 130
		assert idx.garbage(1) == 26
		assert idx.last_insert(1) == 125
		assert idx.direction(1) == 2
		assert idx.n_direction(1) == 7
		assert idx.n_recs(1) == 1
		assert idx.max_trx_id(1) == 0x1122334455667788
		assert idx.level(1) == 3
		assert idx.index_id(1) == 0x0102030405060708


def test_offsets_against_raw_bytes(ibd_file):
	# hand placed bytes: level at 64, index id at 66, leaf seg at 74, top seg at 84
	data = bytearray(16384)
	data[24:26] = b'\x45\xbf'
	data[64:66] = b'\x00\x02'
	data[66:74] = b'\x00\x00\x00\x00\x00\x00\x01\x2c'
	data[74:84] = b'\x00\x00\x00\x05' + b'\x00\x00\x00\x02' + b'\x00\xf2'
	data[84:94] = b'\x00\x00\x00\x05' + b'\x00\x00\x00\x02' + b'\x00\x32'
	with PAGE_STORE(ibd_file([bytes(data)])) as store:
		idx = INDEX_HEADER(store)
		assert idx.level(1) == 2
		assert idx.index_id(1) == 300
		assert idx.segment_header(1,'leaf') == SEGMENT_HEADER(5,2,242)
		assert idx.segment_header(1,'top') == SEGMENT_HEADER(5,2,50)


def test_segment_header_root(idx):
	leaf = idx.segment_header(4,'leaf')
	assert leaf == (42,2,242)
	assert leaf.space_id == 42
	assert leaf.page_no == 2
	assert leaf.offset == 242
	assert idx.segment_header(4,'top') == (42,2,50)


def test_segment_header_absent_on_non_root(idx):
	assert idx.segment_header(5,'leaf') is None
	assert idx.segment_header(5,'top') is None


def test_segment_header_absent_when_offset_zero(ibd_file):
	# space/page set but inode offset is 0
	with PAGE_STORE(ibd_file([gen_index_page(1,9,seg_leaf=(3,2,0))])) as store:
		assert INDEX_HEADER(store).segment_header(1,'leaf') is None


def test_segment_header_invalid_kind(idx):
	with pytest.raises(InvalidArgument,match='invalid segment kind'):
		idx.segment_header(4,'root')


def test_max_trx_id_zero_when_absent(idx):
	assert idx.max_trx_id(4) == 0
	assert idx.max_trx_id(7) == 1234


def test_get_all(idx):
	data = idx.get_all(5)
	assert data['PAGE_N_HEAP'] == 0x66
	assert data['ROW_FORMAT'] == 'COMPACT'
	assert data['PAGE_N_RECS'] == 100
	assert data['PAGE_DIRECTION'] == 2
	assert data['PAGE_DIRECTION_NAME'] == DIRECTION_NAME[2] == 'Page Right'
	assert data['PAGE_N_DIRECTION'] == 99
	assert data['PAGE_LEVEL'] == 0
	assert data['PAGE_INDEX_ID'] == 101
	assert data['PAGE_BTR_SEG_LEAF'] is None
	assert data['PAGE_BTR_SEG_TOP'] is None


def test_errors_propagate(sample_ibd):
	with PAGE_STORE(sample_ibd) as store:
		idx = INDEX_HEADER(store)
		with pytest.raises(InvalidArgument):
			idx.level(0)
		with pytest.raises(InvalidArgument,match='beyond last page'):
			idx.index_id(100)


def test_io_errors_propagate(tmp_path):
	with PAGE_STORE(str(tmp_path/'missing.ibd')) as store:
		with pytest.raises(PageIOError):
			INDEX_HEADER(store).index_id(1)
