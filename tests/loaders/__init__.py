"""Tests for variables file loading."""
