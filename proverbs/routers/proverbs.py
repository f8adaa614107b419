from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from proverbs.core.utils import parse_id, with_notice
from proverbs.domain.records import CATEGORIES, ProverbDraft
from proverbs.services.proverb_service import EMPTY, INVALID, NOT_FOUND, ProverbService

router = APIRouter(prefix="", tags=["proverbs"])

MSG_NOT_FOUND = "Proverb not found"
MSG_LOAD_LIST_FAILED = "Failed to load proverbs"
MSG_LOAD_FAILED = "Failed to load proverb"
MSG_REQUIRED = "Please fill in all required fields"
MSG_ADD_FAILED = "Failed to add proverb"
MSG_UPDATE_FAILED = "Failed to update proverb"
MSG_DELETE_FAILED = "Failed to delete proverb"
MSG_RANDOM_FAILED = "Failed to get random proverb"
MSG_NO_PROVERBS = "No proverbs available"


def _get_proverb_service(request: Request) -> ProverbService:
    svc = getattr(getattr(request.app, "state", None), "proverb_service", None)
    if not svc:
        raise RuntimeError("ProverbService not configured")
    return svc


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _render(request: Request, name: str, context: dict) -> HTMLResponse:
    return _templates(request).TemplateResponse(request, name, context)


def _render_form(request: Request, name: str, draft: ProverbDraft, error: str | None = None, proverb_id=None):
    return _render(
        request,
        name,
        {
            "error": error,
            "form_data": draft.form_data(),
            "categories": CATEGORIES,
            "proverb_id": proverb_id,
        },
    )


def _detail_path(proverb_id: str) -> str:
    return f"/proverb/{quote(proverb_id, safe='')}"


def _draft(text_dari: str, text_pashto: str, translation_en: str, meaning: str, category: str) -> ProverbDraft:
    return ProverbDraft(
        text_dari=text_dari,
        text_pashto=text_pashto,
        translation_en=translation_en,
        meaning=meaning,
        category=category,
    )


@router.get("/", response_class=HTMLResponse)
def home(request: Request, success: str = "", error: str = ""):
    svc = _get_proverb_service(request)
    proverbs, reason = svc.list_proverbs()
    if reason:
        error = MSG_LOAD_LIST_FAILED
    return _render(request, "home.html", {"proverbs": proverbs, "success": success, "error": error})


@router.get("/proverb/{proverb_id}", response_class=HTMLResponse)
def proverb_detail(request: Request, proverb_id: str, success: str = "", error: str = ""):
    svc = _get_proverb_service(request)
    proverb, reason = svc.get_proverb(parse_id(proverb_id))
    if reason == NOT_FOUND:
        return RedirectResponse(with_notice("/", error=MSG_NOT_FOUND), status_code=302)
    if reason:
        return RedirectResponse(with_notice("/", error=MSG_LOAD_FAILED), status_code=302)
    return _render(
        request,
        "proverb_detail.html",
        {"proverb": proverb, "success": success, "error": error},
    )


@router.get("/add-proverb", response_class=HTMLResponse)
def add_proverb_form(request: Request):
    return _render_form(request, "add_proverb.html", ProverbDraft.blank())


@router.post("/add-proverb")
def add_proverb(
    request: Request,
    text_dari: str = Form("", alias="textDari"),
    text_pashto: str = Form("", alias="textPashto"),
    translation_en: str = Form("", alias="translationEn"),
    meaning: str = Form(""),
    category: str = Form(""),
):
    svc = _get_proverb_service(request)
    draft = _draft(text_dari, text_pashto, translation_en, meaning, category)
    _, reason = svc.create_proverb(draft)
    if reason == INVALID:
        return _render_form(request, "add_proverb.html", draft, error=MSG_REQUIRED)
    if reason:
        return _render_form(request, "add_proverb.html", draft, error=MSG_ADD_FAILED)
    return RedirectResponse(with_notice("/", success="Proverb added successfully"), status_code=303)


@router.get("/edit-proverb/{proverb_id}", response_class=HTMLResponse)
def edit_proverb_form(request: Request, proverb_id: str):
    svc = _get_proverb_service(request)
    proverb, reason = svc.get_proverb(parse_id(proverb_id))
    if reason == NOT_FOUND:
        return RedirectResponse(with_notice("/", error=MSG_NOT_FOUND), status_code=302)
    if reason:
        return RedirectResponse(with_notice("/", error=MSG_LOAD_FAILED), status_code=302)
    return _render_form(request, "edit_proverb.html", ProverbDraft.from_record(proverb), proverb_id=proverb.id)


@router.post("/edit-proverb/{proverb_id}")
def edit_proverb(
    request: Request,
    proverb_id: str,
    text_dari: str = Form("", alias="textDari"),
    text_pashto: str = Form("", alias="textPashto"),
    translation_en: str = Form("", alias="translationEn"),
    meaning: str = Form(""),
    category: str = Form(""),
):
    svc = _get_proverb_service(request)
    record_id = parse_id(proverb_id)
    draft = _draft(text_dari, text_pashto, translation_en, meaning, category)
    _, reason = svc.update_proverb(record_id, draft)
    if reason == NOT_FOUND:
        return RedirectResponse(with_notice("/", error=MSG_NOT_FOUND), status_code=303)
    if reason:
        return _render_form(request, "edit_proverb.html", draft, error=MSG_UPDATE_FAILED, proverb_id=record_id)
    return RedirectResponse(
        with_notice(f"/proverb/{record_id}", success="Proverb updated successfully"), status_code=303
    )


@router.post("/delete-proverb/{proverb_id}")
def delete_proverb(request: Request, proverb_id: str):
    svc = _get_proverb_service(request)
    _, reason = svc.delete_proverb(parse_id(proverb_id))
    if reason == NOT_FOUND:
        return RedirectResponse(with_notice(_detail_path(proverb_id), error=MSG_NOT_FOUND), status_code=303)
    if reason:
        return RedirectResponse(with_notice(_detail_path(proverb_id), error=MSG_DELETE_FAILED), status_code=303)
    return RedirectResponse(with_notice("/", success="Proverb deleted successfully"), status_code=303)


@router.get("/random-proverb", response_class=HTMLResponse)
def random_proverb(request: Request):
    svc = _get_proverb_service(request)
    proverb, reason = svc.random_proverb()
    if reason == EMPTY:
        return RedirectResponse(with_notice("/", error=MSG_NO_PROVERBS), status_code=302)
    if reason:
        return RedirectResponse(with_notice("/", error=MSG_RANDOM_FAILED), status_code=302)
    return _render(request, "random_proverb.html", {"proverb": proverb})
