import io
import os

from ..bin import parse as module

def test_main_accepted(test):
	out = io.StringIO()
	err = io.StringIO()
	status = module.main("127.0.0.1", "::1", file=out, error=err)

	test/status == 0
	test/err.getvalue() == ""
	test/out.getvalue().splitlines() == [
		"ip4 127.0.0.1 7f000001",
		"ip6 ::1 " + ("00" * 15) + "01",
	]

def test_main_rejected(test):
	out = io.StringIO()
	err = io.StringIO()
	status = module.main("example.com", "10.0.0.1", file=out, error=err)

	test/status == os.EX_DATAERR
	test/out.getvalue() == "ip4 10.0.0.1 0a000001\n"
	test/err.getvalue() == "[!# ERROR: could not parse the provided address: 'example.com']\n"

def test_main_usage(test):
	err = io.StringIO()
	test/module.main(file=io.StringIO(), error=err) == os.EX_USAGE
	test/err.getvalue() << "usage:"

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules['__main__'])
