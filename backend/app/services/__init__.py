"""
Services package - Core business logic and integrations

Organized by domain responsibility:

Core flow:
    - words: Word-pair generation through an LLM
    - timeline: Cue timing and composition assembly
    - rendering: Json2Video rendering client

Infrastructure (Technical Concerns):
    - llm: LLM providers (OpenAI, Gemini, Ollama)
    - infrastructure/parsing: JSON parsing utilities

Use Cases (Application Layer):
    - use_cases: Business logic orchestration

Architecture Principles:
    - Single Responsibility: Each module/file does one thing
    - Dependency Injection: Services accept dependencies
    - Async-first: All I/O operations use async/await
"""
