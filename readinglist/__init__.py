"""Reading List site generator package.

This package turns a CSV reading list (url, title, description, image,
date) into a single static HTML page that groups the articles by month,
newest first.

Package Structure
-----------------
- `pipeline/site_generator/`:
    Headless stages: CSV loading, month grouping, markup rendering, page
    assembly and output writing, plus a runner chaining them.
- `generate_site.py`: Command-line entrypoint (argument parsing, logging).
- `config.py`: All configuration constants (paths, page texts), as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.
- `templates/`: The bundled page template.

Examples
--------
>>> import readinglist
>>> # See readinglist.generate_site for the entrypoint.

"""
