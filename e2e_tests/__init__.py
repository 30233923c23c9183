"""
End-to-end and integration tests for the posts admin service.

This package contains:
- Project-wide integration tests using Django's test client (test_*.py here)
- Browser-based E2E tests and the harness they run on (e2e/ subdirectory)

Note: named 'e2e_tests' rather than 'tests' so it does not collide with the
posts app's tests package during pytest collection.
"""
