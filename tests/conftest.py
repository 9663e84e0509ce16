import pytest
from gen_page import gen_page
from gen_page import gen_index_page
from gen_page import write_ibd

SPACE_ID = 42

@pytest.fixture
def ibd_file(tmp_path):
	"""write_ibd bound to a file in tmp_path"""
	def _make(pages,tail=b'',name='t1.ibd'):
		return write_ibd(tmp_path/name,pages,tail)
	return _make

@pytest.fixture
def sample_ibd(ibd_file):
	# FSP, bitmap, inode, then index 101 (root level 1 + 2 leaves),
	# index 102 (single root leaf) and one freshly allocated page
	pages = [
		gen_page(1,8,SPACE_ID),
		gen_page(2,5,SPACE_ID),
		gen_page(3,3,SPACE_ID),
		gen_index_page(4,101,1,SPACE_ID,n_heap=0x8005,n_recs=3,seg_leaf=(SPACE_ID,2,242),seg_top=(SPACE_ID,2,50)),
		gen_index_page(5,101,0,SPACE_ID,n_heap=0x8066,n_recs=100,prev=0xFFFFFFFF,next=5,direction=2,n_direction=99),
		gen_index_page(6,101,0,SPACE_ID,n_heap=0x8010,n_recs=14,prev=4,next=0xFFFFFFFF),
		gen_index_page(7,102,0,SPACE_ID,n_heap=0x8003,n_recs=1,max_trx_id=1234,seg_leaf=(SPACE_ID,2,434),seg_top=(SPACE_ID,2,338)),
		gen_page(8,0,0),
	]
	return ibd_file(pages)
