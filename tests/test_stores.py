"""Tests for the in-memory stores."""

import logging

import pytest

from exhibition_api.app.models import Artwork, Gallery, User
from exhibition_api.app.stores import ArtworkStore, GalleryStore, UserStore


@pytest.fixture
def artworks() -> ArtworkStore:
    return ArtworkStore()


class TestArtworkStore:
    def test_empty_store_finds_nothing(self, artworks):
        assert artworks.get_all() == []
        assert artworks.get_by_id(1) is None

    def test_get_by_id_returns_stored_record(self, artworks):
        art = Artwork(7, "Blue Hour", "M. Iyer", 900.0)
        artworks.add(art)
        assert artworks.get_by_id(7) is art

    def test_get_all_preserves_insertion_order(self, artworks):
        for i in (3, 1, 2):
            artworks.add(Artwork(i, f"T{i}", "A", 1.0))
        assert [a.id for a in artworks.get_all()] == [3, 1, 2]

    def test_duplicate_id_is_listed_but_shadowed(self, artworks, caplog):
        first = Artwork(5, "First", "A", 1.0)
        second = Artwork(5, "Second", "B", 2.0)
        artworks.add(first)
        with caplog.at_level(logging.WARNING):
            artworks.add(second)
        assert artworks.get_by_id(5) is first
        assert artworks.get_all() == [first, second]
        assert "Duplicate artwork id 5" in caplog.text

    def test_get_all_returns_a_copy(self, artworks):
        artworks.add(Artwork(1, "T", "A", 1.0))
        listing = artworks.get_all()
        listing.clear()
        assert len(artworks.get_all()) == 1


class TestGalleryStore:
    def test_lookup_returns_the_stored_instance(self):
        store = GalleryStore()
        store.add(Gallery(1, "North Wing"))
        store.get_by_id(1).add_artwork(10)
        assert store.get_by_id(1).artwork_ids == [10]

    def test_first_match_wins(self):
        store = GalleryStore()
        store.add(Gallery(1, "Original"))
        store.add(Gallery(1, "Impostor"))
        assert store.get_by_id(1).name == "Original"
        assert [g.name for g in store.get_all()] == ["Original", "Impostor"]


class TestUserStore:
    def test_default_users(self):
        assert [str(u) for u in UserStore().get_all()] == [
            "admin (admin)",
            "john (user)",
            "guest (user)",
        ]

    @pytest.mark.parametrize("name", ["john", "JOHN", "JoHn"])
    def test_login_ignores_case(self, name):
        assert UserStore().login(name) == User("john", "user")

    def test_unknown_user(self):
        assert UserStore().login("mallory") is None

    def test_custom_users(self):
        store = UserStore([User("curator", "admin")])
        assert store.login("curator").role == "admin"
        assert store.login("admin") is None


class TestRecordText:
    def test_artwork_str(self):
        assert str(Artwork(101, "Sunset Dreams", "A. Sharma", 15000.0)) == (
            "101 | Sunset Dreams by A. Sharma | ₹15000.0"
        )

    def test_gallery_str(self):
        gallery = Gallery(1, "Modern Art Gallery")
        gallery.add_artwork(101)
        gallery.add_artwork(101)
        assert str(gallery) == "1 | Modern Art Gallery (Artworks: 2)"

    def test_artwork_is_immutable(self):
        art = Artwork(1, "T", "A", 1.0)
        with pytest.raises(AttributeError):
            art.price = 2.0
