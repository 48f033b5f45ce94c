#!/usr/bin/env python3
"""Manual script to show which category each catalog file resolves to."""

from dance_timeline.analysis.categories import file_name, resolve_category
from dance_timeline.config import CATALOG_FILENAME, get_virtualdj_dir
from dance_timeline.io.catalog import load_catalog

if __name__ == "__main__":
    store = load_catalog(get_virtualdj_dir() / CATALOG_FILENAME)
    for path in store:
        print(f"{file_name(path)} => {resolve_category(path, store)}")
