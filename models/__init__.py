"""
models/ - Domain Models
=======================
Plain dataclasses for the Northwind entities. They carry no reference
back to the database; repositories build them from rows and persist them.
"""
