"""
Tests for the set tree core.

- test_set_tree.py: Links, navigation, insertion and detachment
- test_traversal.py: Preorder, postorder and pairing walks
- test_invalidate.py: Teardown and rebuild
"""
