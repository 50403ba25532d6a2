"""Tests for variable templates and their resolution."""
