from __future__ import annotations

import json
from pathlib import Path

from lib_console_sync.adapters.dump import DumpAdapter
from lib_console_sync.domain import DumpFormat, MessageEntry


def _entries() -> list[MessageEntry]:
    return [
        MessageEntry.html('<span class="log" style=""> a &amp; b</span>'),
        MessageEntry.begin_group("<span style=''>outer</span>", expanded=True),
        MessageEntry.begin_group("<span style=''>inner</span>", expanded=False),
        MessageEntry.html("deep<br>second"),
        MessageEntry.end_group(),
        MessageEntry.end_group(),
        MessageEntry.clear(),
        MessageEntry.html("after"),
    ]


def test_text_dump_indents_groups() -> None:
    content = DumpAdapter().dump(_entries(), dump_format=DumpFormat.TEXT)
    assert content.splitlines() == [
        " a & b",
        "outer",
        "  inner",
        "    deep",
        "    second",
        "--- console cleared ---",
        "after",
    ]


def test_json_dump_keeps_raw_entries() -> None:
    records = json.loads(DumpAdapter().dump(_entries(), dump_format=DumpFormat.JSON))
    assert [record["kind"] for record in records] == [
        "html",
        "group",
        "groupCollapsed",
        "html",
        "groupEnd",
        "groupEnd",
        "clear",
        "html",
    ]
    assert records[0] == {"index": 0, "kind": "html", "data": '<span class="log" style=""> a &amp; b</span>'}
    assert records[6]["data"] == ""


def test_html_dump_nests_details() -> None:
    content = DumpAdapter().dump(_entries(), dump_format=DumpFormat.HTML)
    assert content.startswith("<html>")
    assert "<details open><summary><span style=''>outer</span></summary>" in content
    assert "<details><summary><span style=''>inner</span></summary>" in content
    assert content.count("<details") == content.count("</details>")
    assert '<hr class="clear">' in content


def test_html_dump_balances_unterminated_groups() -> None:
    entries = [MessageEntry.end_group(), MessageEntry.begin_group("g", expanded=True)]
    content = DumpAdapter().dump(entries, dump_format=DumpFormat.HTML)
    assert content.count("<details") == 1
    assert content.count("</details>") == 1


def test_dump_writes_to_path(tmp_path: Path) -> None:
    target = tmp_path / "console.json"
    content = DumpAdapter().dump([MessageEntry.html("x")], dump_format=DumpFormat.JSON, path=target)
    assert target.read_text(encoding="utf-8") == content
