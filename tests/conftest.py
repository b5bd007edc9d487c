import os

# Point the app at a throwaway database before any backend module is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_admissions.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
