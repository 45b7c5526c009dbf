"""
catalog_service package

Backend for the product catalog API:

- FastAPI application factory (`main.py`) and routers (`routes/`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing and JWT issuance/verification (`auth.py`)
- Bearer-token guard for protected routes (`guard.py`)
- Account and product persistence (`credentials.py`, `products.py`)
- Pydantic schemas (`schemas.py`) and error mapping (`errors.py`)
"""
