"""Textual rendering for resolved modals."""
