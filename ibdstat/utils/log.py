import datetime
import sys

class LOG(object):
	"""
	INPUT:
		filename:
			None: write nothing
			True: write to stderr
			str : append to this file
	"""
	def __init__(self,filename=None):
		self.filename = filename
		if self.filename is not None:
			if self.filename is True:
				self.f = sys.stderr
			else:
				self.f = open(self.filename,'a')
		else:
			self._write = self._write_nothing

	def _write_nothing(self,msg):
		pass

	def _write(self,msg):
		self.f.write(msg)

	def _format(self,level,args):
		return f"[{datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}] [{level}] {' '.join([ str(x) for x in args ])}\n"

	def info(self,*args):
		return self._write(self._format('INFO',args))

	def error(self,*args):
		return self._write(self._format('ERROR',args))

	def warning(self,*args):
		return self._write(self._format('WARNING',args))

	def close(self):
		if self.filename is not None and self.filename is not True:
			self.f.close()
