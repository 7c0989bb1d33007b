from typing import List
from .models import BookDocument
from langchain_core.documents import Document


class BookCanonicalizer:
    @staticmethod
    def to_text(book: BookDocument) -> str:
        parts = [f"Title: {book.title}"]

        if book.author:
            parts.append(f"Author: {book.author}")

        parts.append(f"Publisher: {book.publisher}")
        parts.append(f"Edition: {book.edition_type.value}")

        if book.limitation:
            parts.append(f"Limitation: {book.limitation} copies")

        if book.illustrator:
            parts.append(f"Illustrator: {book.illustrator}")

        if book.binding:
            parts.append(f"Binding: {book.binding}")

        if book.genre_tags:
            parts.append(f"Genres: {', '.join(book.genre_tags)}")

        if book.publication_year:
            parts.append(f"Year: {book.publication_year}")

        text = ". ".join(parts) + "."
        if book.description:
            text = f"{text} {book.description.strip()}"
        return text


def build_documents(books: List[BookDocument]) -> List[Document]:
    """
    Build Document objects from BookDocument records.

    Metadata carries every field a filter condition can target, under the
    same names the conditions use.
    """
    documents: List[Document] = []

    for book in books:
        metadata = {
            "id": book.id,
            "title": book.title,
            "author": book.author,
            "publisher": book.publisher,
            "edition_type": book.edition_type.value,
            "price": book.price,
            "currency": book.currency,
            "availability": book.availability.value,
            "genre_tags": list(book.genre_tags or []),
            "url": book.url,
            "image_url": book.image_url,
            "reviews": book.reviews,
        }
        documents.append(Document(page_content=BookCanonicalizer.to_text(book), metadata=metadata))

    return documents
