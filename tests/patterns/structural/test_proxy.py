"""Tests for the protected document proxy demonstration."""

from pattern_catalog.patterns.structural.proxy import DocumentProxy, ProxyDemonstration


class TestDocumentProxy:
    def test_denied_access_does_not_load_document(self) -> None:
        proxy = DocumentProxy(title="Secret")

        assert proxy.open(role="guest") == ["Access denied for guest."]
        assert proxy.loaded is False

    def test_granted_access_loads_document_once(self) -> None:
        proxy = DocumentProxy(title="Secret")

        proxy.open(role="admin")
        document = proxy._document
        proxy.open(role="admin")

        assert proxy.loaded is True
        assert proxy._document is document


class TestProxyDemonstration:
    def test_admin_trace(self) -> None:
        assert ProxyDemonstration().demonstrate("admin") == [
            "Access granted for admin.",
            "Reading document: Quarterly Report",
        ]

    def test_guest_trace(self) -> None:
        assert ProxyDemonstration().demonstrate("guest") == ["Access denied for guest."]
