# Services package init
"""
Chirper Backend — Services Layer
==================================

What:  Business logic layer sitting between routes (HTTP) and gateways (Store).
Why:   Separation of concerns: routes handle HTTP, services handle business rules.

Service Inventory:
    - RequestHandler: account registration/login and message CRUD rules
"""
