# CLA check core

"""
CLA Check Core - decides whether a pull request is covered by signed CLAs.

Pipeline:
- Event filter: which webhook events start a check
- Commit classifier: which email decides each commit
- Signature resolver: which commits are unsigned
- State reconciler: which labels and comments to change
"""
