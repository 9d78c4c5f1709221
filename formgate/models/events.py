"""
Side effects requested by the submission controller.

The controller never touches the page. It returns these events from submit()
and reset() and the presentation layer decides how to realise them (toast
component, anchor-click download, form.reset(), window.scrollTo).
"""

from pydantic import BaseModel, ConfigDict
from typing import Literal, Union


class ShowToast(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class DownloadArtifact(BaseModel):
    """Start a browser download of a statically hosted file"""
    model_config = ConfigDict(frozen=True)

    href: str
    filename: str


class ResetForm(BaseModel):
    model_config = ConfigDict(frozen=True)


class ScrollToTop(BaseModel):
    model_config = ConfigDict(frozen=True)


GatewayEvent = Union[ShowToast, DownloadArtifact, ResetForm, ScrollToTop]
