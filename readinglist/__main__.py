"""Allow ``python -m readinglist``."""

from readinglist.generate_site import main

if __name__ == "__main__":
    raise SystemExit(main())
