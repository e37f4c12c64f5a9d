"""
Use Case: Template Library
Listagem, destaques, detalhe, uso e avaliação de templates demo.
"""
from typing import Dict, List, Optional
from loguru import logger

from src.domain.entities import Template
from src.domain.entities.template import MAX_RATING, MIN_RATING
from src.domain.exceptions import ResourceNotFoundError, ValidationError
from src.infrastructure.demo import DemoCatalog

FEATURED_LIMIT = 6
POPULAR_LIMIT = 8


class TemplateLibraryUseCase:
    """
    Operações sobre o catálogo de templates.

    O catálogo é estático: usar ou avaliar um template devolve o resultado
    esperado mas não altera contadores nem a nota armazenada.
    """

    def __init__(self, catalog: DemoCatalog):
        self.catalog = catalog

    def list_templates(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Template]:
        return self.catalog.templates(category=category, search=search)

    def featured(self) -> List[Template]:
        """Templates com nota >= 4.5, mais vistos primeiro."""
        templates = [t for t in self.catalog.all_templates() if t.is_featured]
        templates.sort(key=lambda t: (t.views, t.rating), reverse=True)
        return templates[:FEATURED_LIMIT]

    def popular(self) -> List[Template]:
        """Mais usados primeiro (downloads, depois views)."""
        templates = sorted(
            self.catalog.all_templates(),
            key=lambda t: (t.downloads, t.views),
            reverse=True
        )
        return templates[:POPULAR_LIMIT]

    def get_template(self, template_id: str) -> Template:
        template = self.catalog.template(template_id)
        if template is None:
            raise ResourceNotFoundError("Template", template_id)
        return template

    def use_template(
        self,
        template_id: str,
        project_name: Optional[str] = None,
        project_description: Optional[str] = None
    ) -> Dict:
        template = self.get_template(template_id)
        logger.info(f"Template {template.id} used to start a project")
        return {
            "message": "Template ready to use",
            "templateData": template.template_data,
            "projectName": project_name or f"{template.name} Project",
            "projectDescription": project_description or f"Created from {template.name} template"
        }

    def rate_template(self, template_id: str, rating: Optional[float]) -> Dict:
        if rating is None or not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
        template = self.get_template(template_id)
        logger.debug(f"Template {template.id} rated {rating}")
        return {"message": "Rating submitted successfully", "newRating": rating}
