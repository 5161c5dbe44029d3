"""Command-line interface for ECDSA verification."""

import logging
import sys
import time
from typing import Optional

import click

from ecverify import __version__
from ecverify.config import VerifierConfig
from ecverify.curves import SUPPORTED_CURVES
from ecverify.exceptions import EcdsaVerifyError
from ecverify.vectors import get_vector
from ecverify.verifier import HASH_FUNCTIONS, verify_signature

logger = logging.getLogger(__name__)


def _decode_hex(value: str, name: str) -> bytes:
    """Decode a hex argument, accepting an optional 0x prefix"""
    if value.startswith(("0x", "0X")):
        value = value[2:]
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise click.BadParameter(f"{name} is not valid hex") from None


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.ecverify/ecverify.conf)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str]) -> None:
    """ecverify - ECDSA signature verification for secp256r1 and secp256k1."""
    config = VerifierConfig(config_path)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.argument("public_key")
@click.argument("message")
@click.argument("signature")
@click.option(
    "--hash-func",
    default=None,
    help="Hash function applied to the message (default from config: sha256)",
)
@click.option(
    "--curve",
    default=None,
    help="Curve name (default from config: secp256r1)",
)
@click.pass_obj
def verify(
    config: VerifierConfig,
    public_key: str,
    message: str,
    signature: str,
    hash_func: Optional[str],
    curve: Optional[str],
) -> None:
    """Verify SIGNATURE over MESSAGE with PUBLIC_KEY (all hex encoded)."""
    key_bytes = _decode_hex(public_key, "PUBLIC_KEY")
    message_bytes = _decode_hex(message, "MESSAGE")
    signature_bytes = _decode_hex(signature, "SIGNATURE")

    hash_func = hash_func or config.get("hashfunc")
    curve = curve or config.get("curve")

    try:
        valid = verify_signature(key_bytes, message_bytes, signature_bytes, hash_func, curve)
    except EcdsaVerifyError as e:
        raise click.UsageError(str(e)) from None

    click.echo("valid" if valid else "invalid")
    sys.exit(0 if valid else 1)


@cli.command()
@click.option(
    "--iterations",
    type=click.IntRange(min=1),
    default=None,
    help="Number of verifications to run (default from config: 100)",
)
@click.option(
    "--curve",
    default=None,
    help="Curve whose reference vector is timed (default from config: secp256r1)",
)
@click.pass_obj
def bench(config: VerifierConfig, iterations: Optional[int], curve: Optional[str]) -> None:
    """Benchmark verification of a built-in reference vector."""
    if iterations is None:
        iterations = config.getint("benchiterations")
        if iterations < 1:
            raise click.BadParameter(
                f"benchiterations must be at least 1, got {iterations}",
                param_hint="config",
            )

    try:
        vector = get_vector(curve or config.get("curve"))
    except EcdsaVerifyError as e:
        raise click.UsageError(str(e)) from None

    click.echo(f"Running {iterations} verifications on {vector.curve_name}/{vector.hash_function}...")
    start = time.perf_counter()
    for _ in range(iterations):
        if not verify_signature(
            vector.public_key,
            vector.message,
            vector.signature,
            vector.hash_function,
            vector.curve_name,
        ):
            raise click.ClickException("Reference vector failed to verify")
    elapsed = time.perf_counter() - start

    per_call_ms = elapsed / iterations * 1000
    rate = iterations / elapsed if elapsed > 0 else float("inf")
    click.echo(f"  Total: {elapsed:.3f}s")
    click.echo(f"  Per verification: {per_call_ms:.3f}ms")
    click.echo(f"  Rate: {rate:.1f} verifications/s")


@cli.command()
def curves() -> None:
    """List supported curves and hash functions."""
    click.echo("Curves:")
    for name, params in SUPPORTED_CURVES.items():
        click.echo(f"  {name} ({params.p.bit_length()}-bit)")
    click.echo("Hash functions:")
    for name in HASH_FUNCTIONS:
        click.echo(f"  {name}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
