"""Marketplace roles a user can hold."""

from enum import Enum


class UserRole(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"
    SUPPLIER = "supplier"
