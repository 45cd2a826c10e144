#!/usr/bin/env python3
"""
Catalogue Admin Entry Point

Run the application with:
    python run.py

Or with uvicorn directly:
    uvicorn catalog_admin.main:app --reload --port 8000
"""
import uvicorn

from catalog_admin.config import get_settings


def main():
    """Run the option API server"""
    settings = get_settings()
    print("=" * 50)
    print(f"  {settings.APP_NAME}")
    print("=" * 50)
    print(f"  Server:  http://{settings.HOST}:{settings.PORT}")
    print(f"  Catalog: {settings.API_BASE_URL[:50]}")
    print(f"  Debug:   {settings.DEBUG}")
    print("=" * 50)
    print()

    uvicorn.run(
        "catalog_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    main()
