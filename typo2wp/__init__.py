"""
Top-level package for the Typo → WordPress migration utility.

This package bundles everything required to copy a Typo blog database
into an existing WordPress installation: categories and tags become
taxonomy terms, pages and articles become posts, and comments and
trackbacks become WordPress comments.  Modules are split into
subpackages:

* :mod:`typo2wp.extractors` – read-only access to the Typo tables
* :mod:`typo2wp.migrators` – writes against the prefixed WordPress tables
* :mod:`typo2wp.parsers` – text filter settings decoding
* :mod:`typo2wp.models` – WordPress row models
* :mod:`typo2wp.utils` – reporting, errors, dates, prompts and pre-flight checks

Orchestration of the phases is handled in :mod:`typo2wp.migration_tool`
and the command line lives in :mod:`typo2wp.cli`.
"""

__version__ = "0.1.0"
