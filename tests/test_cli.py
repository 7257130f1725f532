import unittest
import io
import os
import runpy
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from rsatools.__main__ import main
from rsatools.params import from_env


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out), redirect_stderr(io.StringIO()):
        code = main(list(argv))
    return code, out.getvalue()


class TestCli(unittest.TestCase):

    def test_defaults(self):
        code, out = run()
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertTrue(lines[0].startswith('RSAKey(modulus='))
        message = int(lines[1].split()[-1])
        self.assertEqual(message.bit_length(), 256)
        self.assertEqual(lines[3].split()[-1], lines[1].split()[-1])

    def test_hex_message(self):
        code, out = run('--bits', '128', '--message', 'deadbeef')
        self.assertEqual(code, 0)
        self.assertIn(f'message:    {0xdeadbeef}', out)
        self.assertIn(f'deciphered: {0xdeadbeef}', out)

    def test_message_bits(self):
        code, out = run('--bits', '64', '--message-bits', '16', '-v')
        self.assertEqual(code, 0)
        message = int(out.splitlines()[1].split()[-1])
        self.assertEqual(message.bit_length(), 16)

    def test_message_too_large(self):
        with self.assertRaises(SystemExit) as ctx:
            run('--bits', '32', '--message', 'ff' * 16)
        self.assertEqual(ctx.exception.code, 2)

    def test_invalid_size(self):
        with self.assertRaises(SystemExit) as ctx:
            run('--bits', '4')
        self.assertEqual(ctx.exception.code, 2)

    def test_env_defaults(self):
        with mock.patch.dict(os.environ, {"RSATOOLS_KEY_BITS": "64", "RSATOOLS_MESSAGE_BITS": "20"}):
            code, out = run()
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(int(lines[1].split()[-1]).bit_length(), 20)
        self.assertLessEqual(int(lines[0].split("=")[1].split(",")[0]).bit_length(), 64)

    def test_env_not_an_integer(self):
        err = io.StringIO()
        with mock.patch.dict(os.environ, {"RSATOOLS_KEY_BITS": "lots"}), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("RSATOOLS_KEY_BITS", err.getvalue())

    def test_from_env(self):
        with mock.patch.dict(os.environ, {"RSATOOLS_KEY_BITS": "1024"}):
            self.assertEqual(from_env("RSATOOLS_KEY_BITS", 512), 1024)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(from_env("RSATOOLS_KEY_BITS", 512), 512)
        with mock.patch.dict(os.environ, {"RSATOOLS_MESSAGE_BITS": "2.5"}):
            with self.assertRaisesRegex(ValueError, "RSATOOLS_MESSAGE_BITS"):
                from_env("RSATOOLS_MESSAGE_BITS", 256)

    def test_example(self):
        runpy.run_module('rsatools.RSA.example', run_name='__main__')


if __name__ == '__main__':
    unittest.main()
