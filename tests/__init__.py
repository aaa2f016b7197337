"""Test package for the cluster canvas.

This package contains:
- Unit tests (test_union_find.py, test_spatial.py, test_zoom.py, test_scene.py)
- Configuration tests (test_config_loader.py)
- Action server tests (test_actions.py)
- Test configuration (conftest.py)
"""
