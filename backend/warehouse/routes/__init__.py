# Routes package init
"""
Warehouse Backend — API Routes Package
========================================

Route Inventory:
    - root.py:     GET  /                        (liveness text)
                   GET  /health                  (service + database status)
    - users.py:    GET  /api/users               (list users)
                   POST /api/users               (create user, duplicate = no-op)
    - records.py:  GET  /api/schedule            POST /api/schedule
                   GET  /api/shipment            POST /api/shipment
                   GET  /api/miscellaneous       POST /api/miscellaneous/save

Routes stay thin: pull the body, call the service, return its result.
"""
