"""Allow ``python -m jvm_bindgen``."""

from jvm_bindgen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
