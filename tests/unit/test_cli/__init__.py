"""Tests for the SuperAI command line interface."""
