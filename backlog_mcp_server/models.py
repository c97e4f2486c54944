"""
Data models for Backlog API payloads

Success payloads are forwarded exactly as Backlog sent them, so their shapes
are TypedDicts used for annotation only. Error bodies are parsed with
pydantic to pull out the message and code.
"""
from typing import List, Optional, TypedDict

from pydantic import BaseModel


class Project(TypedDict, total=False):
    """Backlog project"""
    id: int
    projectKey: str
    name: str
    chartEnabled: bool
    useResolvedForChart: bool
    subtaskingEnabled: bool
    projectLeaderCanEditProjectLeader: bool
    useWiki: bool
    useFileSharing: bool
    useWikiTreeView: bool
    useSubversion: bool
    useGit: bool
    useOriginalImageSizeAtWiki: bool
    textFormattingRule: str
    archived: bool
    displayOrder: int
    useDevAttributes: bool


class RecentlyViewedProject(TypedDict, total=False):
    """Entry of /users/myself/recentlyViewedProjects"""
    project: Project
    updated: str


class NulabAccount(TypedDict, total=False):
    nulabId: str
    name: str
    uniqueId: str


class User(TypedDict, total=False):
    """Backlog user (as returned by /users/myself)"""
    id: int
    userId: str
    name: str
    roleType: int
    lang: str
    mailAddress: str
    nulabAccount: NulabAccount


class Space(TypedDict, total=False):
    """Backlog space information"""
    spaceKey: str
    name: str
    ownerId: int
    lang: str
    timezone: str
    reportSendTime: str
    textFormattingRule: str
    created: str
    updated: str


class BacklogErrorDetail(BaseModel):
    message: Optional[str] = None
    code: Optional[int] = None
    moreInfo: Optional[str] = None


class BacklogErrorResponse(BaseModel):
    """Error body: {"errors": [{"message", "code", "moreInfo"}]}"""
    errors: List[BacklogErrorDetail] = []

    @property
    def first(self) -> Optional[BacklogErrorDetail]:
        return self.errors[0] if self.errors else None
