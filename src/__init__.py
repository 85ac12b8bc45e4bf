"""
ERP Insights - source root

Sales forecasting, insight cards and report summaries for the ERP dashboard.

Layer Structure:
- Domain: Business records, forecast/insight/report entities and pure services
- Application: Use cases and DTOs
- Infrastructure: Data backend gateway, repositories and health check
- Presentation: FastAPI controllers
- Shared: Logging, environment helpers and enums
- Main: Composition root, settings and entry point
"""
