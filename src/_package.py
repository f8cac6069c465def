"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-gallery"
DESCRIPTION = "Runnable demos of classic creational and structural design patterns"
