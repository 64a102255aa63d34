from conftest import ADD_BOOK


class TestAddBook:
    """Test the addBook mutation."""

    def test_add_book_example_sequence(self, add_author, add_book):
        author = add_author(name="Jane Doe", rating=4.5)
        assert author["id"] == "1"

        body = add_book("Novel X", ["1"])
        assert "errors" not in body
        assert body["data"]["addBook"] == {
            "id": "1",
            "title": "Novel X",
            "authors": [{"id": "1", "name": "Jane Doe", "rating": 4.5}],
        }

        bad = add_book("Bad", ["999"])
        assert bad["data"]["addBook"] is None
        assert bad["errors"][0]["message"] == "One or more author IDs do not exist"

    def test_add_book_with_several_authors(self, add_author, add_book):
        a = add_author(name="A", rating=1.0)
        b = add_author(name="B", rating=2.0)
        c = add_author(name="C", rating=3.0)

        body = add_book("Anthology", [c["id"], a["id"], b["id"]])

        authors = body["data"]["addBook"]["authors"]
        assert {x["id"] for x in authors} == {a["id"], b["id"], c["id"]}

    def test_add_book_listed_with_same_authors(self, graphql, add_author, add_book):
        a = add_author(name="A", rating=1.0)
        b = add_author(name="B", rating=2.0)
        created = add_book("Pair", [a["id"], b["id"]])["data"]["addBook"]

        body = graphql("{ books { id title authors { id } } }")

        listed = [book for book in body["data"]["books"] if book["id"] == created["id"]]
        assert len(listed) == 1
        assert {x["id"] for x in listed[0]["authors"]} == {a["id"], b["id"]}

    def test_add_book_without_authors(self, graphql, add_book):
        body = add_book("Anonymous", [])

        assert "errors" not in body
        assert body["data"]["addBook"]["authors"] == []

        listing = graphql("{ books { title authors { id } } }")
        assert listing["data"]["books"] == [{"title": "Anonymous", "authors": []}]

    def test_add_book_unknown_author_writes_nothing(self, graphql, add_author, add_book):
        author = add_author()
        add_book("Existing", [author["id"]])
        before = len(graphql("{ books { id } }")["data"]["books"])

        body = add_book("Ghost", [author["id"], "999"])

        assert body["data"]["addBook"] is None
        assert body["errors"][0]["message"] == "One or more author IDs do not exist"
        after = len(graphql("{ books { id } }")["data"]["books"])
        assert after == before

    def test_add_book_non_numeric_author_id(self, graphql, add_book):
        body = add_book("Typo", ["abc"])

        assert body["data"]["addBook"] is None
        assert body["errors"][0]["message"] == "One or more author IDs do not exist"
        assert graphql("{ books { id } }")["data"]["books"] == []

    def test_add_book_duplicate_author_ids(self, graphql, add_author, add_book):
        author = add_author()

        body = add_book("Twice", [author["id"], author["id"]])

        assert body["data"]["addBook"] is None
        assert body["errors"][0]["message"] == "Duplicate author IDs are not allowed"
        assert graphql("{ books { id } }")["data"]["books"] == []

    def test_add_book_empty_title(self, add_book):
        body = add_book("   ", [])

        assert body["data"]["addBook"] is None
        assert body["errors"][0]["message"] == "title cannot be empty"

    def test_add_book_missing_author_ids_rejected(self, test_client):
        response = test_client.post(
            "/graphql",
            json={"query": 'mutation { addBook(title: "X") { id } }'},
        )
        body = response.json()

        assert body.get("data") is None
        assert "authorIds" in body["errors"][0]["message"]

    def test_add_book_accepts_integer_ids_in_variables(self, graphql, add_author):
        author = add_author()

        body = graphql(ADD_BOOK, {"title": "Numeric", "authorIds": [int(author["id"])]})

        assert body["data"]["addBook"]["authors"][0]["id"] == author["id"]

    def test_error_does_not_affect_sibling_fields(self, graphql):
        body = graphql(
            """
            mutation {
              good: addAuthor(name: "Fine", rating: 1.5) { id name }
              bad: addBook(title: "Broken", authorIds: ["42"]) { id }
            }
            """
        )

        assert body["data"]["good"] == {"id": "1", "name": "Fine"}
        assert body["data"]["bad"] is None
        assert len(body["errors"]) == 1
        assert body["errors"][0]["path"] == ["bad"]


class TestListBooks:
    """Test the books query."""

    def test_list_books_empty(self, graphql):
        assert graphql("{ books { id } }")["data"]["books"] == []

    def test_list_books_in_creation_order(self, graphql, add_author, add_book):
        author = add_author()
        for title in ("Alpha", "Beta", "Gamma"):
            add_book(title, [author["id"]])

        body = graphql("{ books { title } }")

        assert [b["title"] for b in body["data"]["books"]] == ["Alpha", "Beta", "Gamma"]
