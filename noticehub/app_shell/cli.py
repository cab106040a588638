import argparse
import logging
import sys
from pathlib import Path

from noticehub.domain.formatting import format_timestamp
from noticehub.rules.loader import DEFAULT_RULES_PATH, default_rules, load_rules
from noticehub.services.board import NoticeBoard

logger = logging.getLogger("cli")


def get_board(args: argparse.Namespace) -> NoticeBoard:
    if args.rules is not None:
        rules_path = Path(args.rules)
        if not rules_path.exists():
            logger.error(f"Rules file {rules_path} not found.")
            sys.exit(1)
        rules = load_rules(rules_path)
    elif DEFAULT_RULES_PATH.exists():
        rules = load_rules(DEFAULT_RULES_PATH)
    else:
        rules = default_rules()

    logging.getLogger().setLevel(rules.logging.level)
    board = NoticeBoard.create(rules, db_path=args.db)
    board.seed_if_empty()
    return board


def report(result) -> None:
    print(result.message)
    if not result.success:
        sys.exit(1)


def require_login(board: NoticeBoard):
    session = board.require_session()
    if session is None:
        print("Not logged in. Run `noticehub login` first.")
        sys.exit(1)
    return session


def handle_seed(board: NoticeBoard, args: argparse.Namespace) -> None:
    # get_board already seeded; report what is there now
    print(f"{len(board.list_users())} users, {len(board.list_notices())} notices.")


def handle_register(board: NoticeBoard, args: argparse.Namespace) -> None:
    report(board.register(args.name, args.email, args.password, args.role))


def handle_login(board: NoticeBoard, args: argparse.Namespace) -> None:
    report(board.login(args.email, args.password))


def handle_logout(board: NoticeBoard, args: argparse.Namespace) -> None:
    report(board.logout())


def handle_whoami(board: NoticeBoard, args: argparse.Namespace) -> None:
    session = require_login(board)
    print(f"{session.name} <{session.email}> ({session.role})")


def handle_notices(board: NoticeBoard, args: argparse.Namespace) -> None:
    if args.action == "list":
        notices = board.visible_notices()
        if not notices:
            print("No notices.")
        for n in notices:
            status = "published" if n.published else "draft"
            print(f"{n.id}  [{status}]  {n.title}  by {n.author_name}, {format_timestamp(n.created_at)}")
            if args.verbose:
                print(f"    {n.body}")
    elif args.action == "add":
        report(board.add_notice(args.title, args.body))
    elif args.action == "delete":
        report(board.delete_notice(args.notice_id))
    elif args.action == "publish":
        report(board.toggle_publish(args.notice_id))


def handle_favorites(board: NoticeBoard, args: argparse.Namespace) -> None:
    session = require_login(board)
    if args.action == "list":
        notices = board.favorite_notices(session.id)
        if not notices:
            print("No favorites yet.")
        for n in notices:
            print(f"{n.id}  {n.title}")
    elif args.action == "toggle":
        result = board.toggle_favorite(session.id, args.notice_id)
        print("Added to favorites." if result.favorited else "Removed from favorites.")


def handle_profile(board: NoticeBoard, args: argparse.Namespace) -> None:
    if args.action == "update":
        report(board.update_profile(args.name, args.email))
    elif args.action == "password":
        report(board.change_password(args.old_password, args.new_password))
    elif args.action == "delete":
        report(board.delete_own_account())


def handle_users(board: NoticeBoard, args: argparse.Namespace) -> None:
    if args.action == "list":
        # Passwords are part of the stored record; never print them
        for u in board.list_users():
            print(f"{u.id}  {u.role:<8} {u.name} <{u.email}>")
    elif args.action == "delete":
        report(board.delete_user(args.user_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NoticeHub CLI")
    parser.add_argument("--rules", default=None, help="Path to rules.yaml")
    parser.add_argument("--db", default=None, help="SQLite store path (overrides rules and env)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Seed demo accounts and the welcome notice")

    register = subparsers.add_parser("register", help="Create an account")
    register.add_argument("name")
    register.add_argument("email")
    register.add_argument("password")
    register.add_argument("--role", choices=["teacher", "student"], default="student")

    login = subparsers.add_parser("login", help="Log in and keep the session")
    login.add_argument("email")
    login.add_argument("password")

    subparsers.add_parser("logout", help="Clear the current session")
    subparsers.add_parser("whoami", help="Show the current session")

    notices = subparsers.add_parser("notices", help="List and manage notices")
    notices_sub = notices.add_subparsers(dest="action", required=True)
    notices_list = notices_sub.add_parser("list")
    notices_list.add_argument("-v", "--verbose", action="store_true", help="Show bodies")
    notices_add = notices_sub.add_parser("add")
    notices_add.add_argument("title")
    notices_add.add_argument("body")
    notices_sub.add_parser("delete").add_argument("notice_id")
    notices_sub.add_parser("publish", help="Toggle published state").add_argument("notice_id")

    favorites = subparsers.add_parser("favorites", help="Your favorite notices")
    favorites_sub = favorites.add_subparsers(dest="action", required=True)
    favorites_sub.add_parser("list")
    favorites_sub.add_parser("toggle").add_argument("notice_id")

    profile = subparsers.add_parser("profile", help="Manage your account")
    profile_sub = profile.add_subparsers(dest="action", required=True)
    profile_update = profile_sub.add_parser("update")
    profile_update.add_argument("name")
    profile_update.add_argument("email")
    profile_password = profile_sub.add_parser("password")
    profile_password.add_argument("old_password")
    profile_password.add_argument("new_password")
    profile_sub.add_parser("delete", help="Delete your account and your notices")

    users = subparsers.add_parser("users", help="Teacher user administration")
    users_sub = users.add_subparsers(dest="action", required=True)
    users_sub.add_parser("list")
    users_sub.add_parser("delete").add_argument("user_id")

    return parser


HANDLERS = {
    "seed": handle_seed,
    "register": handle_register,
    "login": handle_login,
    "logout": handle_logout,
    "whoami": handle_whoami,
    "notices": handle_notices,
    "favorites": handle_favorites,
    "profile": handle_profile,
    "users": handle_users,
}


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    board = get_board(args)
    HANDLERS[args.command](board, args)


if __name__ == "__main__":
    main()
