from apc_progress.auth.token_manager import resolve_bearer_token
from apc_progress.core.course_progress import run_progress_session
from apc_progress.network.graphql_client import GraphQLClient
from apc_progress.network.http_client import create_session
from apc_progress.utils.config_utils import (
    get_fym_endpoint,
    get_request_timeout,
    get_units_endpoint,
)
from apc_progress.utils.logging_utils import log_error, log_info


def main() -> int:
    token = resolve_bearer_token()

    session = create_session(token)
    timeout = get_request_timeout()
    fym_client = GraphQLClient(get_fym_endpoint(), session, timeout=timeout)
    units_client = GraphQLClient(get_units_endpoint(), session, timeout=timeout)

    try:
        run_progress_session(fym_client, units_client)
    except KeyboardInterrupt:
        log_info("Interrupted, bye!")
        return 130
    except Exception as exc:
        log_error(f"Progress update aborted: {exc}")
        return 1
    finally:
        session.close()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
