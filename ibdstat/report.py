import json
from ibdstat.page_type import GET_PAGE_TYPE_NAME
from ibdstat.ibdstat import PAGE_TYPE_PREFIX

PADDING = '    '

def _page_type_name(page_type):
	name = GET_PAGE_TYPE_NAME(page_type)
	return name if name != '' else 'Unrecognized'

def FORMAT_STATS(filename,stats,page_type_stats,index_stats):
	lines = [f"Stats ({filename}):"]
	for key in sorted(stats):
		lines.append(f"{PADDING}{key}: {stats[key]}")
	lines.append('')

	lines.append('Page Type Stats:')
	for page_type in sorted(page_type_stats):
		lines.append(f"{PADDING}{_page_type_name(page_type)} ({page_type}): {page_type_stats[page_type]}")
	lines.append('')

	lines.append(f"Index Stats ({len(index_stats)} indexes):")
	for index_id in sorted(index_stats):
		lines.append(f"{PADDING}{index_id}:")
		single_index_stats = index_stats[index_id]
		for key in sorted(single_index_stats):
			if key.startswith(PAGE_TYPE_PREFIX) and key[len(PAGE_TYPE_PREFIX):].isdigit():
				page_type = int(key[len(PAGE_TYPE_PREFIX):])
				lines.append(f"{PADDING*2}{_page_type_name(page_type)} ({page_type}): {single_index_stats[key]}")
			else:
				lines.append(f"{PADDING*2}{key}: {single_index_stats[key]}")
	lines.append('')
	return '\n'.join(lines)

def _format_value(v):
	if v is None:
		return '-'
	if isinstance(v,tuple): # SEGMENT_HEADER
		return ' '.join([ f"{k}:{x}" for k,x in zip(v._fields,v) ])
	return str(v)

def FORMAT_PAGE(dump):
	lines = [f"Page {dump['PAGE_NO']} ({dump['PAGE_TYPE_NAME'] or 'Unrecognized'}):"]
	for k,v in dump['FIL_HEADER'].items():
		lines.append(f"{PADDING}{k}: {_format_value(v)}")
	if dump['INDEX_HEADER'] is not None:
		for k,v in dump['INDEX_HEADER'].items():
			lines.append(f"{PADDING}{k}: {_format_value(v)}")
	lines.append('')
	return '\n'.join(lines)

def _prepare(obj):
	# namedtuples would be written as lists
	if isinstance(obj,dict):
		return { k:_prepare(v) for k,v in obj.items() }
	if isinstance(obj,list):
		return [ _prepare(x) for x in obj ]
	if isinstance(obj,tuple) and hasattr(obj,'_asdict'):
		return dict(obj._asdict())
	return obj

def FORMAT_JSON(obj):
	return json.dumps(_prepare(obj))
