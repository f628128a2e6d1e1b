"""Landing-page routes: home, checkout, and the Stripe return pages."""


from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..config import Settings
from ..core.pricing import format_price

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
router = APIRouter()

HIGHLIGHTS = [
	"Resumos objetivos das cinco áreas do ENEM",
	"Questões comentadas com o padrão de correção",
	"Plano de estudos de 8 semanas em PDF",
]


def render_page(
	request: Request,
	*,
	template_name: str,
	active_page: str,
	status_code: int = 200,
	**context,
) -> HTMLResponse:
	settings: Settings = request.app.state.settings
	return templates.TemplateResponse(
		request,
		template_name,
		{
			"brand": settings,
			"active_page": active_page,
			"product": {
				"name": settings.product_name,
				"price": str(settings.product_price),
				"price_display": format_price(settings.product_price, settings.currency, locale=settings.locale),
			},
			"relay_url": settings.relay_url,
			**context,
		},
		status_code=status_code,
	)


@router.get("/health")
def health(request: Request) -> dict:
	return {"status": "ok", "app": request.app.state.settings.app_name}


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
	return render_page(request, template_name="index.html", active_page="home", highlights=HIGHLIGHTS)


@router.get("/checkout", response_class=HTMLResponse)
def checkout(request: Request) -> HTMLResponse:
	return render_page(request, template_name="checkout.html", active_page="checkout")


@router.get("/success", response_class=HTMLResponse)
def success(request: Request, session_id: str = Query(default="")) -> HTMLResponse:
	return render_page(
		request,
		template_name="success.html",
		active_page="success",
		session_id=session_id.strip() or None,
	)


@router.get("/cancel", response_class=HTMLResponse)
def cancel(request: Request) -> HTMLResponse:
	return render_page(request, template_name="cancel.html", active_page="cancel")
