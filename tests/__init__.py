"""Tests for Geohash Cells module."""
