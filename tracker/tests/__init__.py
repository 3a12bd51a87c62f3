"""
Test suite for the todo tracker.

Focus areas:
- Reducer validation and transitions
- Summary line ordering
- Reconstruction / full replay equivalence
- Session log branching
"""
