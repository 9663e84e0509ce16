# errors raised by the page store and the scanner

class IbdstatError(Exception):
	pageno = None
	field = None


class InvalidArgument(IbdstatError, ValueError):
	"""bad page number, field width/offset, file size or segment kind"""


class PageIOError(IbdstatError, OSError):
	"""open/stat/seek/read failures and short reads"""


def WRAP_ERROR(e,op,pageno=None,field=None):
	"""
	INPUT:
		e: IbdstatError
		op: name of the failing operation, e.g. 'SCAN_TABLESPACE()'
		pageno/field: context, kept from e if not given
	RETURN:
		new error of the same class, message '<op>: [<e>]'
	"""
	err = e.__class__(f"{op}: [{e}]")
	err.pageno = pageno if pageno is not None else e.pageno
	err.field = field if field is not None else e.field
	return err
