"""Tests for the Minio repositories, run against a fake client."""
