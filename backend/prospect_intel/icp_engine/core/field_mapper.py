"""
Field mapper for turning stored rows into typed records.

Maps connection, post and article rows (as plain dicts) onto ProfileInput,
ContentItem and WebArticle.
"""
from datetime import datetime, date
from typing import Dict, Any, Callable, List, Optional
import logging
import re

from prospect_intel.schemas import ProfileInput, ContentItem, ContentType, WebArticle


logger = logging.getLogger(__name__)


CONNECTION_FIELD_MAPPINGS = {
    "person_id": "id|str",
    "name": "full_name|trim",
    "headline": "headline|trim",
    "title": "title|trim",
    "current_company": "current_company|trim",
    "about": "about",
    "username": "username",
    "profile_url": "profile_url",
    "profile_picture_url": "profile_picture_url",
    "follower_count": "follower_count|int",
    "connection_count": "connection_count|int",
    "tenure_months": "start_date|months_since",
    "is_creator": "is_creator|bool",
    "is_influencer": "is_influencer|bool",
}

POST_FIELD_MAPPINGS = {
    "item_id": "id|str",
    "text": "post_text",
    "published_at": "posted_date|str",
    "reactions": "total_reactions|int",
    "comments": "comments_count|int",
    "shares": "reposts|int",
    "is_document": "media_type|is_document",
}

LINKEDIN_ARTICLE_FIELD_MAPPINGS = {
    "item_id": "id|str",
    "title": "title|trim",
    "text": "content",
    "url": "url",
    "published_at": "published_date|str",
    "reactions": "engagement.likes|int",
    "comments": "engagement.comments|int",
    "shares": "engagement.shares|int",
}

WEB_ARTICLE_FIELD_MAPPINGS = {
    "title": "title|trim",
    "url": "url",
    "content": "content",
    "published_date": "published_date|str",
    "source": "source",
}


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _months_since(value: Any, today: Optional[date] = None) -> Optional[int]:
    """Whole months from a start date (ISO string, date or {year, month}) to today."""
    today = today or date.today()

    if isinstance(value, dict):
        year, month = _to_int(value.get("year")), _to_int(value.get("month")) or 1
        if year is None:
            return None
        start = date(year, max(1, min(12, month)), 1)
    elif isinstance(value, datetime):
        start = value.date()
    elif isinstance(value, date):
        start = value
    elif isinstance(value, str):
        match = re.match(r"^(\d{4})(?:-(\d{1,2}))?", value.strip())
        if not match:
            logger.debug(f"Unparseable start date: {value!r}")
            return None
        month = int(match.group(2) or 1)
        start = date(int(match.group(1)), max(1, min(12, month)), 1)
    else:
        return None

    months = (today.year - start.year) * 12 + (today.month - start.month)
    return max(0, months)


class FieldMapper:
    """
    Maps source fields to target schema with transformations.

    Supports:
    - Direct mapping: {"name": "full_name"}
    - Nested paths: {"reactions": "engagement.likes"}
    - Transformations: {"follower_count": "follower_count|int"}
    """

    def __init__(self, field_mappings: Dict[str, str]):
        """
        Args:
            field_mappings: Dict mapping target_field -> source_path[|transformer...]
        """
        self.field_mappings = field_mappings
        self.transformers: Dict[str, Callable] = {}
        self._register_default_transformers()

    def _register_default_transformers(self):
        """Register built-in transformation functions."""
        self.transformers["trim"] = lambda x: str(x).strip() if x else None
        self.transformers["lowercase"] = lambda x: str(x).lower() if x else None
        self.transformers["str"] = lambda x: str(x) if x is not None else None
        self.transformers["int"] = _to_int
        self.transformers["bool"] = lambda x: bool(x) if x is not None else None
        self.transformers["months_since"] = _months_since
        self.transformers["is_document"] = lambda x: str(x).lower() == "document" if x else None

    def register_transformer(self, name: str, func: Callable):
        """
        Register a custom transformer function.

        Args:
            name: Transformer name
            func: Function that takes a value and returns transformed value
        """
        self.transformers[name] = func

    def _extract_value(self, data: Dict[str, Any], path: str) -> Any:
        """
        Extract value from nested dict using dot notation ("engagement.likes").
        """
        value: Any = data
        for key in path.split("."):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return None
        return value

    def _apply_transformations(self, value: Any, transformations: str) -> Any:
        """
        Apply a pipe-separated transformation pipeline ("trim|lowercase").

        Raises:
            ValueError: If a transformer name is not registered
        """
        if not transformations or value is None:
            return value

        result = value
        for transformer_name in transformations.split("|"):
            transformer = self.transformers.get(transformer_name.strip())
            if not transformer:
                raise ValueError(
                    f"Unknown transformer: {transformer_name}. "
                    f"Available: {list(self.transformers.keys())}"
                )
            result = transformer(result)

        return result

    def map_fields(self, source_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Map source data to target schema.

        Args:
            source_data: Raw row

        Returns:
            Mapped data with target field names; None values are dropped
        """
        mapped = {}

        for target_field, mapping in self.field_mappings.items():
            if "|" in mapping:
                source_path, transformations = mapping.split("|", 1)
            else:
                source_path, transformations = mapping, None

            value = self._extract_value(source_data, source_path.strip())

            if transformations:
                value = self._apply_transformations(value, transformations)

            if value is not None:
                mapped[target_field] = value

        return mapped

    def map_batch(self, source_data_list: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [self.map_fields(data) for data in source_data_list]


connection_mapper = FieldMapper(CONNECTION_FIELD_MAPPINGS)
post_mapper = FieldMapper(POST_FIELD_MAPPINGS)
linkedin_article_mapper = FieldMapper(LINKEDIN_ARTICLE_FIELD_MAPPINGS)
web_article_mapper = FieldMapper(WEB_ARTICLE_FIELD_MAPPINGS)


def to_profile(row: Dict[str, Any]) -> ProfileInput:
    return ProfileInput(**connection_mapper.map_fields(row))


def to_post(row: Dict[str, Any]) -> ContentItem:
    return ContentItem(content_type=ContentType.POST, **post_mapper.map_fields(row))


def to_linkedin_article(row: Dict[str, Any]) -> ContentItem:
    return ContentItem(content_type=ContentType.ARTICLE, **linkedin_article_mapper.map_fields(row))


def to_web_article(row: Dict[str, Any]) -> WebArticle:
    return WebArticle(**web_article_mapper.map_fields(row))
