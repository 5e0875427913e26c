"""
LLM integration module for the Anthropic Claude API.

This module provides the ClaudeProvider implementation of the
VerificationProvider protocol, its prompt template, and reply parsing.
"""
