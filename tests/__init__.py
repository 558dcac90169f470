"""Test suite for storyframe.

Test Structure:
- unit/: Unit tests for individual components
  - timeline/: Segment ledger and narration estimates
  - techniques/: Techniques, easing, stagger, registry
  - scene/: Elements, bindings, resolution, authoring session
  - frame/: Layout and frame state compilation
  - theming/, config/, utils/: Ambient stack
- integration/: The showcase scene end to end
- conftest.py: Shared fixtures and test configuration
"""
