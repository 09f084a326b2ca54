from enum import Enum


class ResourceType(str, Enum):
    NOTES = "notes"
    PYQ = "pyq"
    BOOKS = "books"
    PRACTICAL = "practical"


class StorageType(str, Enum):
    GOOGLE_DRIVE = "google_drive"
    CLOUDINARY = "cloudinary"
    URL = "url"
