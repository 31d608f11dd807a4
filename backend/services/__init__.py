"""
Service layer: the two dashboard access paths.

- dashboard_data_service: direct database queries
- dashboard_api_client: remote HTTP API
"""
