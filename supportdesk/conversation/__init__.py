"""Conversation state: queries, responses and per-customer contexts."""
