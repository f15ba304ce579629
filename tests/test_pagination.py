"""Tests for request options, pagination links and meta."""

import pytest

from ocean_client.application.domain import ListOptions, ListVolumeParams
from ocean_client.application.exceptions import InvalidRequest
from ocean_client.infrastructure.api_models import Links, Pages, page_number_from_url
from ocean_client.infrastructure.base_client import (
    add_options,
    add_query,
    build_path,
)


class TestListOptions:
    def test_zero_fields_are_omitted(self):
        assert ListOptions().to_query() == {}
        assert ListOptions(page=2).to_query() == {"page": 2}
        assert ListOptions(per_page=50).to_query() == {"per_page": 50}

    def test_volume_filters(self):
        params = ListVolumeParams(name="myvolume")
        assert params.to_query() == {"name": "myvolume"}

        params = ListVolumeParams(region="nyc3", name="myvolume", page=1)
        assert params.to_query() == {
            "page": 1,
            "region": "nyc3",
            "name": "myvolume",
        }

    @pytest.mark.parametrize(
        "options, expected",
        [
            (None, "/v2/volumes"),
            (ListOptions(), "/v2/volumes"),
            (ListOptions(page=1, per_page=1), "/v2/volumes?page=1&per_page=1"),
            (ListVolumeParams(region="nyc3"), "/v2/volumes?region=nyc3"),
        ],
    )
    def test_add_options(self, options, expected):
        assert add_options("/v2/volumes", options) == expected

    def test_add_options_keeps_existing_query(self):
        path = add_options("/v2/volumes?name=a", ListOptions(page=3))
        assert path == "/v2/volumes?name=a&page=3"

    def test_add_query_formats_booleans(self):
        path = add_query("/v2/registry/docker-credentials", {"read_write": False})
        assert path == "/v2/registry/docker-credentials?read_write=false"

    def test_add_query_rejects_unparsable_path(self):
        with pytest.raises(InvalidRequest):
            add_query("/v2/\x00", {"page": 1})


class TestBuildPath:
    def test_parameters_are_escaped(self):
        path = build_path(
            "/v2/registry/{registry}/repositories/{repository}/tags",
            registry="foo",
            repository="team/app",
        )
        assert path == "/v2/registry/foo/repositories/team%2Fapp/tags"


class TestPageNumbers:
    @pytest.mark.parametrize(
        "link, expected",
        [
            ("https://api.digitalocean.com/v2/volumes?page=2", 2),
            ("https://api.digitalocean.com/v2/volumes?per_page=5&page=11", 11),
            ("https://api.digitalocean.com/v2/volumes", 0),
            ("https://api.digitalocean.com/v2/volumes?page=two", 0),
            ("https://api.digitalocean.com/v2/volumes?page=", 0),
            ("/v2/volumes?page=3&page=4", 3),
            ("", 0),
            (None, 0),
        ],
    )
    def test_page_number_from_url(self, link, expected):
        assert page_number_from_url(link) == expected

    def test_pages(self):
        pages = Pages(
            first="https://api.digitalocean.com/v2/volumes?page=1",
            prev="https://api.digitalocean.com/v2/volumes?page=2",
            next="https://api.digitalocean.com/v2/volumes?page=4",
            last="https://api.digitalocean.com/v2/volumes?page=9",
        )
        assert pages.first_page == 1
        assert pages.prev_page == 2
        assert pages.next_page == 4
        assert pages.last_page == 9

    def test_empty_links(self):
        links = Links.model_validate({})
        assert links.pages is None
        assert links.current_page() == 1
        assert links.is_last_page()

    def test_first_page(self):
        links = Links.model_validate(
            {
                "pages": {
                    "next": "https://api.digitalocean.com/v2/volumes?page=2",
                    "last": "https://api.digitalocean.com/v2/volumes?page=3",
                }
            }
        )
        assert links.current_page() == 1
        assert not links.is_last_page()

    def test_middle_and_last_page(self):
        middle = Links(
            pages=Pages(
                prev="https://api.digitalocean.com/v2/volumes?page=1",
                next="https://api.digitalocean.com/v2/volumes?page=3",
                last="https://api.digitalocean.com/v2/volumes?page=3",
            )
        )
        assert middle.current_page() == 2
        assert not middle.is_last_page()

        last = Links(
            pages=Pages(
                first="https://api.digitalocean.com/v2/volumes?page=1",
                prev="https://api.digitalocean.com/v2/volumes?page=2",
            )
        )
        assert last.current_page() == 3
        assert last.is_last_page()
