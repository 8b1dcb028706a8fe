"""
Test suite for pynoisefield.

This test suite covers:
- Import tests for all modules and subpackages
- Unit tests for the grid, lattice, sampler, materializer and CLI
- Integration tests for complete field-building workflows
- Taichi backend tests (marked gpu, skipped without taichi)

Run with: pytest
"""
