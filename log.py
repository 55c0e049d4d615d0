from datetime import datetime
import sys

import config

logfile = None

def write(text):
	global logfile

	line = '%s %s' % (datetime.now(), text)
	if 0 <= line.rfind('\n') < len(line)-1:
		line += '\n\n'
	else:
		line += '\n'

	print(line, end='', file=sys.stderr)
	if logfile is None:
		path = config.log_path()
		if path is None:
			return
		logfile = open(path, 'a', encoding='utf-8')
	logfile.write(line)

def flush():
	if logfile is not None:
		logfile.flush()

def close():
	global logfile

	if logfile is not None:
		logfile.close()
		logfile = None
