"""Tests for preparing supplier review notices."""

import pytest
from directory.supplier.notification import SupplierNotificationError, prepare_supplier_notification


class TestPrepareNotification:
    def test_approved_notice(self, registered_supplier):
        supplier = registered_supplier()

        result = prepare_supplier_notification(supplier.id, "approved", admin_email="admin@example.com")

        assert result["success"] is True
        assert result["message"] == "Notification prepared for approved supplier"
        assert result["details"]["email"] == "owner@kigalibites.rw"
        assert result["details"]["businessName"] == "Kigali Bites"
        assert result["details"]["action"] == "approved"
        assert "approved" in result["details"]["subject"]

    def test_rejected_notice(self, registered_supplier):
        supplier = registered_supplier()

        result = prepare_supplier_notification(supplier.id, "rejected")

        assert result["message"] == "Notification prepared for rejected supplier"
        assert result["details"]["subject"].startswith("Application Update")

    def test_unknown_supplier(self):
        with pytest.raises(SupplierNotificationError, match="Supplier not found"):
            prepare_supplier_notification("sup-404", "approved")

    def test_supplier_without_email(self, registered_supplier):
        supplier = registered_supplier(email=None)

        with pytest.raises(SupplierNotificationError, match="Supplier email not found"):
            prepare_supplier_notification(supplier.id, "approved")

    def test_unknown_action(self, registered_supplier):
        supplier = registered_supplier()

        with pytest.raises(ValueError):
            prepare_supplier_notification(supplier.id, "suspended")
