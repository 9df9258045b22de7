"""Product domain constants."""

from django.db import models


class WarehouseType(models.TextChoices):
    PHYSICAL_STORE = "PHYSICAL_STORE", "Physical store"
    ECOMMERCE = "ECOMMERCE", "E-commerce"
