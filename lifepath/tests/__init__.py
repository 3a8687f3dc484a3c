"""Tests for the Lifepath engine, sessions and API."""
