"""
Unit Tests for Materialist

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=materialist --cov-report=html

    # Run specific test
    pytest tests/test_evaluation.py::TestMaterial::test_starting_position_is_zero

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
