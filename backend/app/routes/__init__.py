# Routes package init
"""
Chirper Backend — API Routes Package
======================================

Route Inventory:
    - accounts.py:  POST   /register
                    POST   /login
    - messages.py:  POST   /messages
                    GET    /messages
                    GET    /messages/{messageId}
                    PATCH  /messages/{messageId}
                    DELETE /messages/{messageId}
                    GET    /accounts/{accountId}/messages
    - health.py:    GET    /health

Design Principle:
    Routes are THIN: parse the request, call the RequestHandler, return the
    body. Business rules live in app/services/request_handler.py.
"""
