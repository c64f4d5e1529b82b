"""API tests package.

End-to-end tests for REST API endpoints using TestClient.
Tests the complete request/response cycle including:
- Bearer token authentication
- Request validation
- Response formatting
- Error handling (RFC 9457)
- HTTP status codes

Note:
    API tests use stub handlers to test the presentation layer
    in isolation. Use integration tests for full-stack testing.
"""
