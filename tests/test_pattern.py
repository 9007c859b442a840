import pytest

from ino.pattern import PatternError, RoutePattern, parse_route_pattern


@pytest.mark.parametrize(
    "template, expected",
    [
        ("/users", []),
        ("/users/{id}", ["id"]),
        ("/users/{id}/posts/{postId}", ["id", "postId"]),
        ("/posts/{year:\\d{4}}/{slug:[^/]+}", ["year", "slug"]),
        ("/users/{id}/", ["id"]),
        (
            "/api/{version}/users/{id:\\d+}/profile/{section:[a-z]+}",
            ["version", "id", "section"],
        ),
        ("/files/{name}/download", ["name"]),
        ("/api/v1/users/{id}", ["id"]),
    ],
)
def test_parse_param_names(template, expected):
    rp = parse_route_pattern(template)
    assert rp.param_names == expected
    assert rp.original == template


def test_parse_simple_keeps_original():
    rp = parse_route_pattern("/users")
    assert rp.original == "/users"
    assert rp.param_names == []


@pytest.mark.parametrize(
    "template, message",
    [
        ("", "pattern cannot be empty"),
        ("/users/{id}/posts/{id}", "duplicate parameter name"),
        ("/users/{}/posts", "parameter name cannot be empty"),
        ("/users/{id:[invalid}", "failed to compile regex pattern"),
    ],
)
def test_parse_errors(template, message):
    with pytest.raises(PatternError) as info:
        parse_route_pattern(template)
    assert message in str(info.value)


def test_pattern_error_is_value_error():
    with pytest.raises(ValueError):
        parse_route_pattern("")


def test_depth_counts_slashes_of_template():
    rp = parse_route_pattern("/users/{id}/")
    assert rp.depth == rp.original.count("/")
    assert isinstance(rp, RoutePattern)


MATCH_CASES = {
    "/users": [
        ("/users", {}),
        ("/users/", {}),
        ("/users/123", None),
        ("/user", None),
        ("/", None),
    ],
    "/users/{id}": [
        ("/users/123", {"id": "123"}),
        ("/users/abc", {"id": "abc"}),
        ("/users/", None),
        ("/users/123/posts", None),
        ("/user/123", None),
        ("/users", None),
    ],
    "/users/{id}/posts/{postId}": [
        ("/users/123/posts/456", {"id": "123", "postId": "456"}),
        ("/users/abc/posts/def", {"id": "abc", "postId": "def"}),
        ("/users/123/posts/456/", {"id": "123", "postId": "456"}),
        ("/users/abc/posts/def/", {"id": "abc", "postId": "def"}),
        ("/users/123/posts/", None),
        ("/users/123/posts", None),
        ("/users/123", None),
        ("/users//posts/456", None),
    ],
    "/posts/{year:\\d{4}}/{slug:[^/]+}": [
        ("/posts/2023/my-post-title", {"year": "2023", "slug": "my-post-title"}),
        ("/posts/2023/my-post-title/", {"year": "2023", "slug": "my-post-title"}),
        ("/posts/2023/", None),
        ("/posts/23/my-post", None),
        ("/posts/2023/my/post", None),
        ("/posts/abcd/my-post", None),
        ("/posts/2023", None),
    ],
    "/users/{id}/": [
        ("/users/123", {"id": "123"}),
        ("/users/123/", {"id": "123"}),
        ("/users/abc", {"id": "abc"}),
        ("/users/abc/", {"id": "abc"}),
        ("/users/", None),
        ("/users", None),
    ],
    "/users/{id:\\d{1,3}}": [
        ("/users/1", {"id": "1"}),
        ("/users/123", {"id": "123"}),
        ("/users/1234", None),
        ("/users/abc", None),
        ("/users/", None),
        ("/users/0", {"id": "0"}),
    ],
    "/tags/{tag:[a-zA-Z0-9]+}": [
        ("/tags/python", {"tag": "python"}),
        ("/tags/123", {"tag": "123"}),
        ("/tags/py-thon", None),
        ("/tags/", None),
        ("/tags/py thon", None),
        ("/tags/PY", {"tag": "PY"}),
    ],
    "/static/{*}": [
        ("/static/css/style.css", {"*": "css/style.css"}),
        ("/static/js/app.js", {"*": "js/app.js"}),
        ("/static/images/logo.png", {"*": "images/logo.png"}),
        ("/static/css/style.css/", {"*": "css/style.css"}),
        ("/static/js/app.js/", {"*": "js/app.js"}),
        ("/static/", {"*": ""}),
        ("/static", None),
        ("/api/users", None),
    ],
    "/api/{version}/users/{id:\\d+}/profile": [
        ("/api/v1/users/123/profile", {"version": "v1", "id": "123"}),
        ("/api/v2/users/456/profile", {"version": "v2", "id": "456"}),
        ("/api/v1/users/123/profile/", {"version": "v1", "id": "123"}),
        ("/api/v2/users/456/profile/", {"version": "v2", "id": "456"}),
        ("/api/v1/users/abc/profile", None),
        ("/api/v1/users/123", None),
        ("/api/v1/users/profile", None),
        ("/api/users/123/profile", None),
    ],
    "/files/{name}/download": [
        ("/files/document.pdf/download", {"name": "document.pdf"}),
        ("/files/my-file.txt/download", {"name": "my-file.txt"}),
        ("/files/download", None),
        ("/files//download", None),
        ("/files/document.pdf", None),
        ("/files/document.pdf/download/extra", None),
    ],
    "/email/{email:[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\\.[a-zA-Z]{2,}}": [
        ("/email/user@example.com", {"email": "user@example.com"}),
        ("/email/user.name+tag@example.com", {"email": "user.name+tag@example.com"}),
        ("/email/invalid-email", None),
        ("/email/user@", None),
        ("/email/@domain.com", None),
        ("/email/user@domain", None),
    ],
    "/users/{uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}}": [
        (
            "/users/550e8400-e29b-41d4-a716-446655440000",
            {"uuid": "550e8400-e29b-41d4-a716-446655440000"},
        ),
        ("/users/550e8400-e29b-41d4-a716-44665544000", None),
        ("/users/550e8400-e29b-41d4-a716-4466554400000", None),
        ("/users/550e8400-e29b-41d4-a716-44665544000g", None),
        ("/users/not-a-uuid", None),
    ],
    "/regex/{pattern:[a-z]+}": [
        ("/regex/abc", {"pattern": "abc"}),
        ("/regex/def", {"pattern": "def"}),
        ("/regex/ABC", None),
        ("/regex/123", None),
        ("/regex/", None),
        ("/regex", None),
    ],
    "/api/{version}/users/{id:\\d+}/profile/{section:[a-z]+}": [
        (
            "/api/v1/users/123/profile/settings",
            {"version": "v1", "id": "123", "section": "settings"},
        ),
        (
            "/api/v2/users/456/profile/preferences",
            {"version": "v2", "id": "456", "section": "preferences"},
        ),
        (
            "/api/v1/users/123/profile/settings/",
            {"version": "v1", "id": "123", "section": "settings"},
        ),
        (
            "/api/v2/users/456/profile/preferences/",
            {"version": "v2", "id": "456", "section": "preferences"},
        ),
        ("/api/v1/users/abc/profile/settings", None),
        ("/api/v1/users/123/profile", None),
        ("/api/v1/users/123/profile/SETTINGS", None),
        ("/api/v1/users/123/profile/settings/extra", None),
    ],
    "/search/{query:\\w+}": [
        ("/search/hello", {"query": "hello"}),
        ("/search/world123", {"query": "world123"}),
        ("/search/hello world", None),
        ("/search/", None),
        ("/search", None),
    ],
    "/numbers/{num:\\d{1,5}}": [
        ("/numbers/1", {"num": "1"}),
        ("/numbers/123", {"num": "123"}),
        ("/numbers/12345", {"num": "12345"}),
        ("/numbers/123456", None),
        ("/numbers/abc", None),
        ("/numbers/", None),
    ],
    "/categories/{cat:[A-Z][a-z]+}": [
        ("/categories/Technology", {"cat": "Technology"}),
        ("/categories/Sports", {"cat": "Sports"}),
        ("/categories/technology", None),
        ("/categories/TECH", None),
        ("/categories/", None),
        ("/categories/123", None),
    ],
    "/api/{version}/users/{id}/": [
        ("/api/v1/users/123", {"version": "v1", "id": "123"}),
        ("/api/v1/users/123/", {"version": "v1", "id": "123"}),
        ("/api/v2/users/456", {"version": "v2", "id": "456"}),
        ("/api/v2/users/456/", {"version": "v2", "id": "456"}),
        ("/api/v1/users/", None),
        ("/api/v1/users", None),
    ],
    "/files/{*:.*\\.(css|js|png|jpg)}": [
        ("/files/css/style.css", {"*": "css/style.css"}),
        ("/files/js/app.js", {"*": "js/app.js"}),
        ("/files/images/logo.png", {"*": "images/logo.png"}),
        ("/files/photos/photo.jpg", {"*": "photos/photo.jpg"}),
        ("/files/css/style.css/", {"*": "css/style.css"}),
        ("/files/js/app.js/", {"*": "js/app.js"}),
        ("/files/readme.txt", None),
        ("/files/", None),
        ("/files", None),
    ],
}


@pytest.mark.parametrize(
    "template, path, expected",
    [
        (template, path, expected)
        for template, cases in MATCH_CASES.items()
        for path, expected in cases
    ],
)
def test_match(template, path, expected):
    rp = parse_route_pattern(template)
    assert rp.match(path) == expected


@pytest.mark.parametrize(
    "template, path",
    [
        ("/api/v1/users/{id}", "/api/v1/users/123"),
        ("/search+results/{query}", "/search+results/test"),
        ("/files/*/download", "/files/*/download"),
        ("/help?topic={topic}", "/help?topic=general"),
        ("/api/(v1)/users/{id}", "/api/(v1)/users/123"),
        ("/api/[v1]/users/{id}", "/api/[v1]/users/123"),
        ("/api/{v1}/users/{id}", "/api/{v1}/users/123"),
        ("/api/v1|v2/users/{id}", "/api/v1|v2/users/123"),
        ("/files\\backup\\{filename}", "/files\\backup\\document.txt"),
        ("/pricing/$99/{plan}", "/pricing/$99/premium"),
        ("/api/^v1/users/{id}", "/api/^v1/users/123"),
        (
            "/api/v1.0+beta/users/{id}/profile?section=settings",
            "/api/v1.0+beta/users/123/profile?section=settings",
        ),
    ],
)
def test_static_text_is_escaped(template, path):
    rp = parse_route_pattern(template)
    assert rp.match(path) is not None
    assert rp.match(path + "/") is not None
    assert rp.match(path) == rp.match(path + "/")


def test_escaped_dot_is_literal():
    rp = parse_route_pattern("/api/v1.0/x")
    assert rp.match("/api/v1.0/x") == {}
    assert rp.match("/api/v1x0/x") is None


def test_trailing_newline_does_not_match():
    rp = parse_route_pattern("/users")
    assert rp.match("/users\n") is None