# tests/services/test_tag_service.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from tagapi.domain.dataclasses.page import Page
from tagapi.domain.entities.tag import Tag
from tagapi.domain.errors import NotFoundError
from tagapi.services.schemas import TagDTO
from tagapi.services.tags.service import TagService


class _FakeTagRepo:
    """In-memory TagRepository that records every call."""

    def __init__(self) -> None:
        self.rows: Dict[int, str] = {}
        self.calls: List[str] = []
        self._next_id = 1

    def save_all(self, tags: Sequence[Tag]) -> List[Tag]:
        self.calls.append("save_all")
        out = []
        for t in tags:
            self.rows[self._next_id] = t.name
            out.append(Tag(id=self._next_id, name=t.name))
            self._next_id += 1
        return out

    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        self.calls.append("find_by_id")
        name = self.rows.get(tag_id)
        return Tag(id=tag_id, name=name) if name else None

    def find_by_name_containing(self, fragment: str) -> List[Tag]:
        self.calls.append("find_by_name_containing")
        return [Tag(id=i, name=n) for i, n in sorted(self.rows.items()) if fragment in n]

    def find_by_name_exact(self, name: str) -> Optional[Tag]:
        self.calls.append("find_by_name_exact")
        for i, n in self.rows.items():
            if n == name:
                return Tag(id=i, name=n)
        return None

    def find_all_paged(self, page: int, size: int) -> Page[Tag]:
        self.calls.append("find_all_paged")
        items = [Tag(id=i, name=n) for i, n in sorted(self.rows.items())]
        return Page(content=items[page * size:(page + 1) * size], number=page, size=size, total_elements=len(items))

    def update_by_id(self, tag: Tag) -> Optional[Tag]:
        self.calls.append("update_by_id")
        if tag.id not in self.rows:
            return None
        self.rows[tag.id] = tag.name
        return Tag(id=tag.id, name=tag.name)

    def delete_by_id(self, tag_id: int) -> bool:
        self.calls.append("delete_by_id")
        return self.rows.pop(tag_id, None) is not None


@pytest.fixture()
def repo():
    return _FakeTagRepo()


@pytest.fixture()
def svc(repo):
    return TagService(repo)


def test_save_tags_returns_dtos_in_order_with_ids(svc, repo):
    out = svc.save_tags([TagDTO(name="b"), TagDTO(name="a"), TagDTO(id=99, name="c")])

    assert [d.name for d in out] == ["b", "a", "c"]
    assert all(isinstance(d, TagDTO) and d.id is not None for d in out)
    # client-sent ids are not honoured on create
    assert 99 not in repo.rows
    assert repo.calls == ["save_all"]


def test_retrieve_all_tags_maps_page_content(svc):
    svc.save_tags([TagDTO(name=f"t{i}") for i in range(3)])

    page = svc.retrieve_all_tags(0, 2)
    assert [d.name for d in page.content] == ["t0", "t1"]
    assert all(isinstance(d, TagDTO) for d in page.content)
    assert page.total_elements == 3 and page.total_pages == 2


def test_retrieve_tag_by_id_raises_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.retrieve_tag_by_id(42)


def test_name_queries(svc):
    svc.save_tags([TagDTO(name="tag1"), TagDTO(name="tagX"), TagDTO(name="other")])

    assert {t.name for t in svc.find_tag_by_name("tag")} == {"tag1", "tagX"}
    assert svc.retrieve_tag_by_name("tag1").name == "tag1"
    with pytest.raises(NotFoundError):
        svc.retrieve_tag_by_name("missing")


def test_update_tag(svc):
    (saved,) = svc.save_tags([TagDTO(name="old")])

    updated = svc.update_tag(TagDTO(id=saved.id, name="new"))
    assert updated == TagDTO(id=saved.id, name="new")

    with pytest.raises(NotFoundError):
        svc.update_tag(TagDTO(id=saved.id + 1, name="nope"))


def test_delete_tag_is_idempotent(svc):
    (saved,) = svc.save_tags([TagDTO(name="x")])

    assert svc.delete_tag(saved.id) is True
    assert svc.delete_tag(saved.id) is False


def test_each_operation_is_one_repo_call(svc, repo):
    svc.retrieve_all_tags(0, 50)
    svc.find_tag_by_name("a")
    svc.delete_tag(1)
    assert repo.calls == ["find_all_paged", "find_by_name_containing", "delete_by_id"]


def test_find_tag_by_name_keeps_case(svc):
    svc.save_tags([TagDTO(name="Tag1"), TagDTO(name="tag2"), TagDTO(name="TAGX")])

    assert [t.name for t in svc.find_tag_by_name("tag")] == ["tag2"]
