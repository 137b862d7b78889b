# PayCash Gateway - PayDunya pass-through API
__version__ = "1.0.0"
