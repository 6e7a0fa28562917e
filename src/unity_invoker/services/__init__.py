"""Service layer: Unity launch operations returning ServiceResult."""
