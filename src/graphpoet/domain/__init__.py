"""Domain layer — graph ADT, tokenizer, bridge scoring, poet.

This layer depends only on stdlib and networkx.
It must never import from services, infrastructure, commands, or config.
"""
