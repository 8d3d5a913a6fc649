"""
In-memory search engine package.

This package provides a pure-Python search stack:
- analyzers: Tokenizer pipeline (lowercase, punctuation, stop words, stemming)
- fuzzy: Edit distance, similarity and best-match lookup
- autocomplete: Completion suggestions over candidate lists
- weighting: Field weighting by text repetition
- inverted_index: Term postings with incremental maintenance
- document_store: Live documents plus their term cache
- stats: TF-IDF statistics
- search_index: Index orchestration and query execution
- ranking: Index-free ranking of caller records
"""
