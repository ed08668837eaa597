from __future__ import annotations

from pwaat_installer.main import main as core_main


def main(argv: list[str] | None = None) -> int:
    # CLI and GUI must share one code path; this only delegates.
    return core_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
