from typing import Optional

import jinja2

PAGE_SIZE = 100

_environment = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False)

PAGINATION_TEMPLATE = _environment.from_string(
    "first: {{ page_size }}{% if cursor %} after: {{ cursor|tojson }}{% endif %}"
)

QUERIES = {
    "GET_INFO": """query getInfo {
  viewer {
    user {
      id
      email
      name
    }
  }
}
""",
    "GET_ORG_MEMBERS": """query getOrgMembers {
  organization(slug: {{ org_slug|tojson }}) {
    members({{ pagination }}) {
      edges {
        node {
          id
          role
          user {
            id
            name
            email
          }
        }
      }
    }
  }
}
""",
    "GET_TEAMS": """query getTeams {
  organization(slug: {{ org_slug|tojson }}) {
    teams({{ pagination }}) {
      edges {
        node {
          id
          slug
          name
        }
      }
    }
  }
}
""",
    "GET_TEAM_MEMBERS": """query getTeamMembers {
  team(slug: {{ team_slug|tojson }}) {
    members({{ pagination }}) {
      edges {
        node {
          id
          role
          user {
            id
            name
            email
          }
        }
      }
    }
  }
}
""",
}


def _render(name: str, **params: str) -> str:
    return _environment.from_string(QUERIES[name]).render(**params)


def build_pagination_args(cursor: Optional[str]) -> str:
    """Render the connection arguments for one page.

    An empty cursor requests the first page; anything else continues after it.
    """
    return PAGINATION_TEMPLATE.render(page_size=PAGE_SIZE, cursor=cursor or "")


def build_info_query() -> str:
    return QUERIES["GET_INFO"]


def build_users_query(org_slug: str, cursor: Optional[str]) -> str:
    return _render(
        "GET_ORG_MEMBERS",
        org_slug=org_slug,
        pagination=build_pagination_args(cursor),
    )


def build_teams_query(org_slug: str, cursor: Optional[str]) -> str:
    return _render(
        "GET_TEAMS",
        org_slug=org_slug,
        pagination=build_pagination_args(cursor),
    )


def build_team_members_query(team_slug: str, cursor: Optional[str]) -> str:
    return _render(
        "GET_TEAM_MEMBERS",
        team_slug=team_slug,
        pagination=build_pagination_args(cursor),
    )
