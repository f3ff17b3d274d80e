"""
Data Analysis tool page - example implementation.

This is an example of how to add a tool page to the toolkit. None of the
controls are wired to any behaviour; replace the panels with your actual
data analysis functionality.
"""

from ..base import Component

ANALYSIS_OPTIONS = [
    ("descriptive", "Descriptive Statistics", "Mean, median, mode, standard deviation"),
    ("correlation", "Correlation Analysis", "Relationship between variables"),
    ("visualization", "Data Visualization", "Charts and graphs"),
]


class DataAnalysisPage(Component):
    def render(self) -> str:
        return f"""
        <div class="container">
            <div class="hero hero--data">
                <h1><span aria-hidden="true">📊</span> Data Analysis Tool</h1>
                <p>Analyze and visualize your data with AI-powered insights</p>
            </div>
            <div class="panel-grid">
                {self._render_upload_panel()}
                {self._render_options_panel()}
            </div>
            {self._render_results_panel()}
            <p class="text-center"><a href="/" class="back-link">← Back to Toolkit</a></p>
        </div>
        """

    def _render_upload_panel(self) -> str:
        return """
        <section class="card" aria-labelledby="upload-heading">
            <h2 id="upload-heading">Upload Data</h2>
            <div class="dropzone">
                <p>Drag and drop your files here, or click to browse</p>
                <p class="text-muted">Supports CSV, Excel, JSON</p>
                <button type="button" class="btn btn-secondary" disabled>Choose Files</button>
            </div>
        </section>
        """

    def _render_options_panel(self) -> str:
        options = "".join(
            f"""
            <div class="option-row">
                <input {self.attributes(type="checkbox", id=key, disabled=True)}>
                <label for="{key}">
                    <span class="option-row__title">{self.escape(title)}</span>
                    <span class="option-row__hint text-muted">{self.escape(hint)}</span>
                </label>
            </div>"""
            for key, title, hint in ANALYSIS_OPTIONS
        )
        return f"""
        <section class="card" aria-labelledby="options-heading">
            <h2 id="options-heading">Analysis Options</h2>
            {options}
            <button type="button" class="btn btn-success btn-block" disabled>Start Analysis</button>
        </section>
        """

    def _render_results_panel(self) -> str:
        return """
        <section class="card" aria-labelledby="results-heading">
            <h2 id="results-heading">Analysis Results</h2>
            <p class="text-muted text-center">Upload data and run analysis to see results here</p>
        </section>
        """
