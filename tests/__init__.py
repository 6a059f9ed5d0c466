# classicrypt Test Suite
"""
Comprehensive test suite including:
- Unit tests for each core engine
- Integration tests (dispatcher, audit log, CLI)
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
