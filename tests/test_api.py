"""Tests for the HTTP endpoints."""
import pytest

from textkit.settings import settings


def test_health_endpoint(client):
    """Test /healthz returns ok status."""
    response = client.get("/healthz")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["service"] == "textkit"
    assert data["version"] == "0.1.0"


def test_version_endpoint(client):
    """Test /version returns version info."""
    response = client.get("/version")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "textkit"
    assert data["version"] == "0.1.0"
    assert "fastapi" in data["dependencies"]
    assert "git_sha" in data


def test_request_headers(client):
    """Test every response carries request id and timing headers."""
    response = client.get("/healthz")
    assert "X-Request-ID" in response.headers
    assert float(response.headers["X-Process-Time"]) >= 0


def test_similarity_post(client):
    """Test scoring through a JSON body."""
    response = client.post("/v1/similarity", json={"first": "casa", "second": "casaco"})
    assert response.status_code == 200

    data = response.json()
    assert data["similarity"] == pytest.approx(2 / 3)
    assert data["matches"] == 2
    assert data["adjusted_length"] == 6
    assert data["substring_length"] == settings.default_substring_length
    assert data["case_sensitive"] is settings.default_case_sensitive
    assert data["request_id"] == response.headers["X-Request-ID"]
    assert "total" in data["timing_ms"]


def test_similarity_post_options(client):
    """Test explicit n-gram size and case sensitivity."""
    response = client.post(
        "/v1/similarity",
        json={"first": "CASA", "second": "casaco", "substring_length": 3, "case_sensitive": True},
    )
    assert response.status_code == 200
    assert response.json()["similarity"] == 0.0

    response = client.post(
        "/v1/similarity",
        json={"first": "aaaa", "second": "aaaaaaaa", "substring_length": 1},
    )
    assert response.json()["matches"] == 4


def test_similarity_post_short_inputs(client):
    """Test short inputs score 0 rather than failing."""
    response = client.post("/v1/similarity", json={"first": "", "second": ""})
    assert response.status_code == 200
    assert response.json()["similarity"] == 0.0
    assert response.json()["adjusted_length"] == 0


def test_similarity_post_rejects_bad_substring_length(client):
    """Test the validator rejects n-gram sizes below 1."""
    response = client.post(
        "/v1/similarity", json={"first": "a", "second": "b", "substring_length": 0}
    )
    assert response.status_code == 400

    data = response.json()
    assert data["error"]["code"] == "validation_failed"
    assert data["error"]["details"]["errors"][0]["field"] == ["substring_length"]


def test_similarity_post_missing_field(client):
    """Test a missing input string is a validation failure."""
    response = client.post("/v1/similarity", json={"first": "abc"})
    assert response.status_code == 400
    fields = [issue["field"] for issue in response.json()["error"]["details"]["errors"]]
    assert ["second"] in fields


def test_similarity_post_too_long(client):
    """Test inputs above the configured length are rejected."""
    response = client.post(
        "/v1/similarity",
        json={"first": "a" * (settings.max_input_length + 1), "second": "abc"},
    )
    assert response.status_code == 400


def test_similarity_get(client):
    """Test scoring through the query string."""
    response = client.get(
        "/v1/similarity", params={"first": "hello", "second": "hella", "substring_length": 3}
    )
    assert response.status_code == 200
    assert response.json()["similarity"] == pytest.approx(2 / 3)


def test_similarity_get_rejects_bad_query(client):
    """Test query validation runs before the endpoint."""
    response = client.get("/v1/similarity", params={"first": "hello"})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["location"] == "query"


def test_ngrams_endpoint(client):
    """Test listing n-grams of a path parameter."""
    response = client.get("/v1/ngrams/casaco", params={"substring_length": 2})
    assert response.status_code == 200
    assert response.json()["ngrams"] == ["ca", "as", "sa", "ac", "co"]


def test_ngrams_endpoint_rejects_bad_size(client):
    """Test the n-gram size is validated from the query string."""
    response = client.get("/v1/ngrams/casaco", params={"substring_length": 0})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["location"] == "query"


def test_sort_endpoint(client):
    """Test sorting objects by key."""
    items = [{"name": "c", "rank": 3}, {"name": "a", "rank": 1}, {"name": "b", "rank": 2}]
    response = client.post("/v1/sort", json={"items": items, "sort_key": "rank"})
    assert response.status_code == 200
    assert [item["name"] for item in response.json()["items"]] == ["a", "b", "c"]


def test_sort_endpoint_missing_key(client):
    """Test items without the sort key are reported by index."""
    items = [{"rank": 1}, {"name": "x"}]
    response = client.post("/v1/sort", json={"items": items, "sort_key": "rank"})
    assert response.status_code == 400

    issues = response.json()["error"]["details"]["errors"]
    assert issues == [
        {"message": "Item has no key 'rank'", "field": ["items", 1, "rank"], "type": "missing"}
    ]


def test_sort_endpoint_incomparable(client):
    """Test incomparable values are an invalid argument."""
    items = [{"k": 1}, {"k": "one"}]
    response = client.post("/v1/sort", json={"items": items, "sort_key": "k"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_argument"


def test_max_path_sum_endpoint(client):
    """Test the grid path sum endpoint."""
    response = client.post(
        "/v1/puzzles/max-path-sum", json={"matrix": [[1, 3, 3], [2, 1, 4], [0, 6, 4]]}
    )
    assert response.status_code == 200
    assert response.json()["max_sum"] == 12


def test_max_path_sum_endpoint_ragged(client):
    """Test ragged grids are rejected by the validator."""
    response = client.post("/v1/puzzles/max-path-sum", json={"matrix": [[1, 2], [3]]})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["message"] == (
        "matrix rows must all have the same length"
    )


def test_two_sum_endpoint(client):
    """Test the two-sum endpoint."""
    response = client.post("/v1/puzzles/two-sum", json={"nums": [2, 7, 11, 15], "target": 9})
    assert response.status_code == 200
    assert response.json()["indices"] == [1, 0]


def test_two_sum_endpoint_no_pair(client):
    """Test no pair gives null indices."""
    response = client.post("/v1/puzzles/two-sum", json={"nums": [1, 2], "target": 10})
    assert response.status_code == 200
    assert response.json()["indices"] is None


def test_two_sum_endpoint_bad_body(client):
    """Test non-numeric input is rejected."""
    response = client.post("/v1/puzzles/two-sum", json={"nums": ["x"], "target": 1})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["field"] == ["nums", 0]


def test_sort_endpoint_item_limit(client):
    """Test more items than TEXTKIT_MAX_SORT_ITEMS is a 400 validation failure."""
    items = [{"k": i} for i in range(settings.max_sort_items + 1)]
    response = client.post("/v1/sort", json={"items": items, "sort_key": "k"})
    assert response.status_code == 400

    data = response.json()
    assert data["success"] is False
    assert data["error"]["code"] == "validation_failed"
    assert data["error"]["details"]["errors"][0]["type"] == "too_long"
    assert data["error"]["details"]["errors"][0]["field"] == ["items"]


def test_sort_endpoint_item_limit_configurable(client, monkeypatch):
    """Test the item limit is read from settings on every request."""
    monkeypatch.setattr(settings, "max_sort_items", 2)
    response = client.post("/v1/sort", json={"items": [{"k": 3}, {"k": 2}, {"k": 1}], "sort_key": "k"})
    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["type"] == "too_long"


def test_max_path_sum_endpoint_non_numeric(client):
    """Test non-numeric cells are rejected with the error envelope."""
    response = client.post("/v1/puzzles/max-path-sum", json={"matrix": [["x"]]})
    assert response.status_code == 400

    data = response.json()
    assert data["success"] is False
    assert data["error"]["code"] == "validation_failed"
    assert data["error"]["details"]["errors"][0]["message"] == "matrix cells must be numbers"


@pytest.mark.parametrize(
    "path", ["/v1/similarity", "/v1/sort", "/v1/puzzles/max-path-sum", "/v1/puzzles/two-sum"]
)
def test_malformed_json_body(client, path):
    """Test unparseable JSON gets a 400 with the error envelope on every body endpoint."""
    response = client.post(path, content="{bad", headers={"content-type": "application/json"})
    assert response.status_code == 400

    data = response.json()
    assert data["success"] is False
    assert data["request_id"] == response.headers["X-Request-ID"]
    assert data["error"]["code"] == "validation_failed"
    assert data["error"]["details"]["location"] == "body"
    assert data["error"]["details"]["errors"][0]["type"] == "json_invalid"
