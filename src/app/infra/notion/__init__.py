"""Infra Notion: destino das tarefas criadas."""

from app.infra.notion.notion_record_creator import (
    NotionRecordCreator,
    build_page_children,
    build_page_properties,
)

__all__ = ["NotionRecordCreator", "build_page_children", "build_page_properties"]
