"""Centralized configuration for kb-search using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kb_search.domain.model import FieldWeights, TokenizeOptions


class Settings(BaseSettings):
    """Strictly typed defaults loaded from ``KB_SEARCH_*`` environment variables.

    Library callers may ignore this entirely and pass domain objects
    directly; the factories and the CLI read it.
    """

    model_config = SettingsConfigDict(
        env_prefix="KB_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    # Query defaults
    search_limit: int = Field(default=10, ge=1, description="Default maximum number of search results")
    min_score: float = Field(default=0.1, description="Default minimum relevance score")
    similar_limit: int = Field(default=5, ge=1, description="Default result count for similar-document lookups")

    # Field weights
    title_weight: float = Field(default=3.0, ge=0.0, description="Weight of the title field")
    content_weight: float = Field(default=1.0, ge=0.0, description="Weight of the content field")
    tags_weight: float = Field(default=2.0, ge=0.0, description="Weight of the joined tags")
    category_weight: float = Field(default=1.5, ge=0.0, description="Weight of the category label")

    # Tokenizer
    lowercase: bool = Field(default=True, description="Lowercase text before tokenizing")
    remove_stop_words: bool = Field(default=True, description="Drop common English function words")
    stemming: bool = Field(default=True, description="Apply suffix stemming")
    remove_punctuation: bool = Field(default=True, description="Replace punctuation with spaces")
    min_token_length: int = Field(default=2, ge=1, description="Shortest token kept")

    def field_weights(self) -> FieldWeights:
        return FieldWeights(
            title=self.title_weight,
            content=self.content_weight,
            tags=self.tags_weight,
            category=self.category_weight,
        )

    def tokenize_options(self) -> TokenizeOptions:
        return TokenizeOptions(
            lowercase=self.lowercase,
            remove_stop_words=self.remove_stop_words,
            stemming=self.stemming,
            remove_punctuation=self.remove_punctuation,
            min_token_length=self.min_token_length,
        )
