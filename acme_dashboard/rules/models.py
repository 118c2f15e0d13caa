from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=lambda: ["DATABASE_URL"])

class RoutesRules(BaseModel):
    post_login: str = "/dashboard"

class PasswordRules(BaseModel):
    min_length: int = Field(default=6, ge=1)

class SessionCookieRules(BaseModel):
    name: str = "access_token"
    secure: bool = False
    http_only: bool = True
    same_site: str = "lax"

class SessionsRules(BaseModel):
    ttl_minutes: int = Field(default=60 * 24, gt=0)
    cookie: SessionCookieRules = Field(default_factory=SessionCookieRules)

class AuthRules(BaseModel):
    password: PasswordRules = Field(default_factory=PasswordRules)
    sessions: SessionsRules = Field(default_factory=SessionsRules)

class CacheRules(BaseModel):
    listing_ttl_seconds: int = Field(default=0, ge=0)

class Rules(BaseModel):
    project: ProjectRules
    ops: OpsRules = Field(default_factory=OpsRules)
    routes: RoutesRules = Field(default_factory=RoutesRules)
    auth: AuthRules = Field(default_factory=AuthRules)
    cache: CacheRules = Field(default_factory=CacheRules)
