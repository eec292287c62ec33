"""HostelHub Models.

ORM models (database tables):
    from hostelhub.models.orm import Hostel, FloorPlan

Pydantic contracts (API request/response):
    from hostelhub.models.contracts import HostelPublic, HostelPage
"""
