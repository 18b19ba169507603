# Services package init
"""
Warehouse Backend — Services Layer
====================================

What:  Statement-level logic between routes (HTTP) and the database.
How:   Services take the request's AsyncSession, run exactly one statement,
       and translate failures into application exceptions.

Service Inventory:
    - UserService:   list users, insert-or-ignore a user
    - RecordService: list/insert rows of the schedule, shipment and
                     miscellaneous tables
"""
