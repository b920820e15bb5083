from pathlib import Path
from typing import Optional

from docx import Document
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from kdp_page_setup.core.models import PageGeometry

# Child sequence of w:settings (CT_Settings); new flags must keep this order
_SETTINGS_ORDER = (
    "w:writeProtection", "w:view", "w:zoom", "w:removePersonalInformation",
    "w:removeDateAndTime", "w:doNotDisplayPageBoundaries", "w:displayBackgroundShape",
    "w:printPostScriptOverText", "w:printFractionalCharacterWidth", "w:printFormsData",
    "w:embedTrueTypeFonts", "w:embedSystemFonts", "w:saveSubsetFonts", "w:saveFormsData",
    "w:mirrorMargins", "w:alignBordersAndEdges", "w:bordersDoNotSurroundHeader",
    "w:bordersDoNotSurroundFooter", "w:gutterAtTop", "w:hideSpellingErrors",
    "w:hideGrammaticalErrors", "w:activeWritingStyle", "w:proofState", "w:formsDesign",
    "w:attachedTemplate", "w:linkStyles", "w:stylePaneFormatFilter", "w:stylePaneSortMethod",
    "w:documentType", "w:mailMerge", "w:revisionView", "w:trackRevisions",
    "w:doNotTrackMoves", "w:doNotTrackFormatting", "w:documentProtection",
    "w:autoFormatOverride", "w:styleLockTheme", "w:styleLockQFSet", "w:defaultTabStop",
    "w:autoHyphenation", "w:consecutiveHyphenLimit", "w:hyphenationZone",
    "w:doNotHyphenateCaps", "w:showEnvelope", "w:summaryLength", "w:clickAndTypeStyle",
    "w:defaultTableStyle", "w:evenAndOddHeaders", "w:bookFoldRevPrinting",
    "w:bookFoldPrinting", "w:bookFoldPrintingSheets", "w:drawingGridHorizontalSpacing",
    "w:drawingGridVerticalSpacing", "w:displayHorizontalDrawingGridEvery",
    "w:displayVerticalDrawingGridEvery", "w:doNotUseMarginsForDrawingGridOrigin",
    "w:drawingGridHorizontalOrigin", "w:drawingGridVerticalOrigin", "w:doNotShadeFormData",
    "w:noPunctuationKerning", "w:characterSpacingControl", "w:printTwoOnOne",
    "w:strictFirstAndLastChars", "w:noLineBreaksAfter", "w:noLineBreaksBefore",
    "w:savePreviewPicture", "w:doNotValidateAgainstSchema", "w:saveInvalidXml",
    "w:ignoreMixedContent", "w:alwaysShowPlaceholderText", "w:doNotDemarcateInvalidXml",
    "w:saveXmlDataOnly", "w:useXSLTWhenSaving", "w:saveThroughXslt", "w:showXMLTags",
    "w:alwaysMergeEmptyNamespace", "w:updateFields", "w:hdrShapeDefaults", "w:footnotePr",
    "w:endnotePr", "w:compat", "w:docVars", "w:rsids", "m:mathPr", "w:attachedSchema",
    "w:themeFontLang", "w:clrSchemeMapping", "w:doNotIncludeSubdocsInStats",
    "w:doNotAutoCompressPictures", "w:forceUpgrade", "w:captions", "w:readModeInkLockDown",
    "w:smartTagType", "sl:schemaLibrary", "w:shapeDefaults", "w:doNotEmbedSmartTags",
    "w:decimalSymbol", "w:listSeparator",
)

_NAMESPACES = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "m": "http://schemas.openxmlformats.org/officeDocument/2006/math",
    "sl": "http://schemas.openxmlformats.org/schemaLibrary/2006/main",
}

# Word's defaults when a section omits w:pgSz / w:pgMar: Letter, 1" margins
_DEFAULT_PAGE_PT = (612.0, 792.0)
_DEFAULT_MARGIN_PT = 72.0


def _clark(tag: str) -> str:
    prefix, local = tag.split(":")
    return f"{{{_NAMESPACES[prefix]}}}{local}"


def _pt(length, default: float) -> float:
    return default if length is None else length.pt


class DocxPageTarget:
    """Word document target backed by python-docx.

    Page size and margins are applied to every section. Nothing is written
    until ``save()``; ``out_path`` defaults to the source path.
    """

    def __init__(self, path: str | Path, out_path: Optional[str | Path] = None, create: bool = False):
        self.path = Path(path)
        self.out_path = Path(out_path) if out_path else self.path
        if create and not self.path.exists():
            self.document = Document()
        else:
            self.document = Document(str(self.path))

    @property
    def sections(self):
        return self.document.sections

    def set_page_width(self, points: float) -> None:
        for section in self.sections:
            section.page_width = Pt(points)

    def set_page_height(self, points: float) -> None:
        for section in self.sections:
            section.page_height = Pt(points)

    def set_margin_top(self, points: float) -> None:
        for section in self.sections:
            section.top_margin = Pt(points)

    def set_margin_bottom(self, points: float) -> None:
        for section in self.sections:
            section.bottom_margin = Pt(points)

    def set_margin_left(self, points: float) -> None:
        for section in self.sections:
            section.left_margin = Pt(points)

    def set_margin_right(self, points: float) -> None:
        for section in self.sections:
            section.right_margin = Pt(points)

    def set_background_color(self, hex_color: str) -> None:
        root = self.document.element
        background = root.find(qn("w:background"))
        if background is None:
            background = OxmlElement("w:background")
            root.insert(0, background)
        background.set(qn("w:color"), hex_color.lstrip("#").upper())
        # Word hides page colour unless this flag is on
        self._set_settings_flag("w:displayBackgroundShape", True)

    def set_mirror_margins(self, enabled: bool) -> None:
        self._set_settings_flag("w:mirrorMargins", enabled)

    def _set_settings_flag(self, tag: str, enabled: bool) -> None:
        settings = self.document.settings.element
        existing = settings.find(qn(tag))
        if not enabled:
            if existing is not None:
                settings.remove(existing)
            return
        if existing is not None:
            return
        successors = {_clark(t) for t in _SETTINGS_ORDER[_SETTINGS_ORDER.index(tag) + 1:]}
        known = {_clark(t) for t in _SETTINGS_ORDER}
        flag = OxmlElement(tag)
        for child in settings:
            # Extension elements (w14:, w15:, ...) trail the schema sequence
            if child.tag in successors or (isinstance(child.tag, str) and child.tag not in known):
                child.addprevious(flag)
                return
        settings.append(flag)

    def background_color(self) -> Optional[str]:
        background = self.document.element.find(qn("w:background"))
        if background is None:
            return None
        return "#" + background.get(qn("w:color"))

    def mirror_margins(self) -> bool:
        return self.document.settings.element.find(qn("w:mirrorMargins")) is not None

    def read_geometry(self) -> PageGeometry:
        section = self.sections[0]
        return PageGeometry(
            width_pt=_pt(section.page_width, _DEFAULT_PAGE_PT[0]),
            height_pt=_pt(section.page_height, _DEFAULT_PAGE_PT[1]),
            top_pt=_pt(section.top_margin, _DEFAULT_MARGIN_PT),
            bottom_pt=_pt(section.bottom_margin, _DEFAULT_MARGIN_PT),
            left_pt=_pt(section.left_margin, _DEFAULT_MARGIN_PT),
            right_pt=_pt(section.right_margin, _DEFAULT_MARGIN_PT),
        )

    def save(self) -> None:
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        self.document.save(str(self.out_path))


def read_docx_geometry(path: str | Path) -> PageGeometry:
    return DocxPageTarget(path).read_geometry()
