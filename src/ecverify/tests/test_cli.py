"""
Test the command-line interface.

This test runs the click commands in-process and checks output and exit
codes.
"""

import os
import unittest
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

# Add src to path
src_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(src_dir))

from ecverify.cli import cli
from ecverify.vectors import SECP256R1_SHA256


class TestCLI(unittest.TestCase):
    """Test CLI commands"""

    def setUp(self):
        cleaned = {k: v for k, v in os.environ.items() if not k.startswith("ECVERIFY_")}
        self.env_patch = patch.dict(os.environ, cleaned, clear=True)
        self.env_patch.start()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = str(Path(self.tmpdir.name) / "ecverify.conf")
        self.runner = CliRunner()
        self.vector_args = [
            SECP256R1_SHA256.public_key.hex(),
            SECP256R1_SHA256.message.hex(),
            SECP256R1_SHA256.signature.hex(),
        ]

    def tearDown(self):
        self.tmpdir.cleanup()
        self.env_patch.stop()

    def invoke(self, *args):
        return self.runner.invoke(cli, ["--config", self.config_path, *args])

    def test_verify_valid(self):
        result = self.invoke("verify", *self.vector_args, "--hash-func", "sha256", "--curve", "secp256r1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("valid", result.output)
        self.assertNotIn("invalid", result.output)

    def test_verify_uses_config_defaults(self):
        """Test that curve and hash default to the config values"""
        result = self.invoke("verify", *self.vector_args)
        self.assertEqual(result.exit_code, 0, result.output)

    def test_verify_invalid(self):
        signature = SECP256R1_SHA256.signature[:-1] + b"\x56"
        args = [self.vector_args[0], self.vector_args[1], signature.hex()]
        result = self.invoke("verify", *args)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("invalid", result.output)

    def test_verify_accepts_0x_prefix(self):
        args = ["0x" + a for a in self.vector_args]
        result = self.invoke("verify", *args)
        self.assertEqual(result.exit_code, 0, result.output)

    def test_verify_unsupported_curve(self):
        result = self.invoke("verify", *self.vector_args, "--curve", "secp384r1")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Unsupported curve: secp384r1", result.output)

    def test_verify_unsupported_curve_from_config(self):
        Path(self.config_path).write_text("[DEFAULT]\ncurve=brainpoolP256r1\n")
        result = self.invoke("verify", *self.vector_args)
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Unsupported curve", result.output)

    def test_verify_bad_hex(self):
        result = self.invoke("verify", "zz", self.vector_args[1], self.vector_args[2])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("not valid hex", result.output)

    def test_verify_wrong_length(self):
        result = self.invoke("verify", self.vector_args[0][:-2], self.vector_args[1], self.vector_args[2])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("64 bytes", result.output)

    def test_bench(self):
        result = self.invoke("bench", "--iterations", "2")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Running 2 verifications", result.output)
        self.assertIn("verifications/s", result.output)

    def test_bench_iterations_from_config(self):
        Path(self.config_path).write_text("[DEFAULT]\nbenchiterations=3\n")
        result = self.invoke("bench")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Running 3 verifications", result.output)

    def test_bench_curve(self):
        """Test timing the secp256k1 reference vector"""
        result = self.invoke("bench", "--iterations", "1", "--curve", "secp256k1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Running 1 verifications on secp256k1/sha256", result.output)

    def test_bench_curve_from_config(self):
        Path(self.config_path).write_text("[DEFAULT]\ncurve=secp256k1\n")
        result = self.invoke("bench", "--iterations", "1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("secp256k1/sha256", result.output)

    def test_bench_unsupported_curve(self):
        result = self.invoke("bench", "--iterations", "1", "--curve", "secp384r1")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Unsupported curve: secp384r1", result.output)

    def test_bench_rejects_non_positive_config_iterations(self):
        """Test that benchiterations below 1 is rejected instead of running zero times"""
        for value in ("-5", "0"):
            Path(self.config_path).write_text(f"[DEFAULT]\nbenchiterations={value}\n")
            result = self.invoke("bench")
            self.assertEqual(result.exit_code, 2, result.output)
            self.assertIn("benchiterations must be at least 1", result.output)
            self.assertNotIn("Rate:", result.output)

    def test_bench_rejects_zero_iterations_option(self):
        result = self.invoke("bench", "--iterations", "0")
        self.assertEqual(result.exit_code, 2)

    def test_curves(self):
        result = self.invoke("curves")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("secp256r1", result.output)
        self.assertIn("secp256k1", result.output)
        self.assertIn("sha256", result.output)

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("0.1.0", result.output)


if __name__ == '__main__':
    unittest.main()
