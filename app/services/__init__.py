# Services package init
"""
Book Catalog Backend — Services Layer
======================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).

Service Inventory:
    - isbn: ISBN-13 checksum validation and normalization (pure functions)
    - BookService: create/list/get/update/soft-delete with ISBN uniqueness
      and soft-delete visibility rules
"""
