"""Test helpers for gtest_wrapper."""
