"""Pretty-print generated Rust code with rustfmt."""

import subprocess

from jvm_bindgen.errors import SetupError

RUSTFMT = "rustfmt"


def format_source(source: str, rustfmt: str = RUSTFMT) -> str:
    """Run ``source`` through ``rustfmt --emit stdout`` and return the result."""
    cmd = [rustfmt, "--edition", "2021", "--emit", "stdout"]
    try:
        result = subprocess.run(
            cmd,
            input=source,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        msg = f"{rustfmt} not found; install it or pass --no-format"
        raise SetupError(msg) from e
    except subprocess.CalledProcessError as e:
        msg = f"{rustfmt} failed: {e.stderr.strip()}"
        raise SetupError(msg) from e
    return result.stdout
