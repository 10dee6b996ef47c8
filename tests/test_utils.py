import json
from citepages.utils import read_page_fields, write_json


def test_read_page_fields(tmp_path):
    p = tmp_path / "fields.txt"
    p.write_text("10-20\n\n  30--40 \n", encoding="utf-8")
    assert read_page_fields(p) == ["10-20", "30--40"]


def test_write_json(tmp_path):
    p = tmp_path / "nested" / "out.json"
    write_json([{"page": "10–20"}], p)
    assert json.loads(p.read_text(encoding="utf-8")) == [{"page": "10–20"}]
