# Routes package init
"""
Book Catalog Backend — API Routes Package
==========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - books.py:   POST   /books/create       (add a book)
                  GET    /books/             (list non-deleted books)
                  GET    /books/{bookId}     (get single book)
                  PATCH  /books/update       (change title)
                  DELETE /books/delete       (soft-delete)
    - health.py:  GET    /health             (service health check)

Routes are thin: they validate request format, call the service, and wrap
the result in the response envelope. Business rules live in app/services.
"""
