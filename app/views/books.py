from flask import Blueprint, render_template, request, redirect, url_for, current_app
from sqlalchemy import func
from .. import db
from ..models import Book

bp = Blueprint('books', __name__)

SORT_COLUMNS = {
    'title': func.lower(Book.title),
    'author': func.lower(Book.authors),
    'year': Book.published_year,
    'added': Book.created_at,
}


@bp.route('/')
def landing():
    return redirect(url_for('books.index'))


@bp.route('/books')
def index():
    q = request.args.get('q', '').strip()
    sort_by = request.args.get('sort', 'title').strip()
    sort_order = request.args.get('order', 'asc').strip()

    if sort_by not in SORT_COLUMNS:
        sort_by = 'title'
    if sort_order not in ('asc', 'desc'):
        sort_order = 'asc'

    query = db.session.query(Book)

    if q:
        # % and _ in the search box are literal characters
        escaped = q.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        like = f"%{escaped}%"
        query = query.filter(
            (Book.title.ilike(like, escape="\\")) |
            (Book.authors.ilike(like, escape="\\"))
        )

    sort_col = SORT_COLUMNS[sort_by]
    if sort_order == 'desc':
        query = query.order_by(sort_col.desc().nullslast(), Book.id.asc())
    else:
        query = query.order_by(sort_col.asc().nullslast(), Book.id.asc())

    books = query.limit(current_app.config['BOOKS_PAGE_LIMIT']).all()

    return render_template(
        'books/list.html',
        books=books,
        q=q,
        total_books=len(books),
        sort_by=sort_by,
        sort_order=sort_order
    )


@bp.route('/books/<int:book_id>')
def book_detail(book_id: int):
    book = db.get_or_404(Book, book_id)
    return render_template('books/detail.html', book=book)
