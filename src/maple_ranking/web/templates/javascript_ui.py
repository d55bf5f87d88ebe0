"""
JavaScript functionality for the Maple ranking dashboard.
"""

import json
from typing import Dict, Any

def get_javascript_content(data: Dict[str, Any]) -> str:
    """Return the complete JavaScript functionality for the web UI."""
    return f"""// Dashboard data
const dashboardData = {json.dumps(data, indent=2, ensure_ascii=False)};

// Current state
let currentSource = dashboardData.default_source;
let selectedName = '';
let playerChart;
let weeklyChart;
let levelChart;
let worldChart;
let jobChart;

const DISTRIBUTION_COLORS = [
    '#667eea', '#a78bfa', '#f472b6', '#fb923c', '#34d399',
    '#22d3ee', '#fbbf24', '#f87171', '#c084fc', '#818cf8'
];

function sourceData() {{
    return dashboardData.data[currentSource] || null;
}}

function escapeHtml(value) {{
    return String(value)
        .replace(/&/g, '&amp;')
        .replace(/</g, '&lt;')
        .replace(/>/g, '&gt;')
        .replace(/"/g, '&quot;');
}}

// Case-insensitive exact match over every record of the source
function filterByName(records, name) {{
    if (!name) {{
        return records;
    }}
    const wanted = name.toLowerCase();
    return records.filter(record => record.name.toLowerCase() === wanted);
}}

function tableRows(data) {{
    // Rows prepared at generation time for the initial selection
    if (selectedName === data.selected_name) {{
        return data.table;
    }}
    if (selectedName) {{
        return filterByName(data.records, selectedName);
    }}
    if (data.recent_window_size <= 0) {{
        return [];
    }}
    return data.records.slice(-data.recent_window_size);
}}

function renderStats(data) {{
    const stats = data.stats;
    document.getElementById('statPlayers').textContent = stats.unique_entity_count;
    document.getElementById('statStart').textContent = stats.earliest_date;
    document.getElementById('statEnd').textContent = stats.latest_date;
    document.getElementById('statMinLevel').textContent = stats.min_level;
    document.getElementById('statMaxLevel').textContent = stats.max_level;
    const updated = data.meta && data.meta.lastUpdated ? data.meta.lastUpdated : dashboardData.generated_at;
    document.getElementById('lastUpdated').textContent = new Date(updated).toLocaleString('ja-JP');
}}

function renderSources() {{
    const container = document.getElementById('sourceButtons');
    container.innerHTML = '';
    dashboardData.sources.forEach(source => {{
        const button = document.createElement('button');
        button.className = 'source-button' + (source.value === currentSource ? ' active' : '');
        button.textContent = source.label;
        button.addEventListener('click', () => {{
            currentSource = source.value;
            // Switching source resets the name filter
            selectedName = '';
            document.getElementById('nameInput').value = '';
            render();
        }});
        container.appendChild(button);
    }});
}}

function renderNameOptions(data) {{
    const options = document.getElementById('nameOptions');
    options.innerHTML = data.names.map(name => `<option value="${{escapeHtml(name)}}"></option>`).join('');
}}

function renderTable(data) {{
    const rows = tableRows(data);
    const body = document.getElementById('rankingBody');
    body.innerHTML = rows.map(record => `
        <tr>
            <td class="rank-cell"><span class="rank ${{record.rank <= 3 ? 'top-rank' : ''}}">${{record.rank}}</span></td>
            <td class="name-cell"><button class="name-button" data-name="${{escapeHtml(record.name)}}" title="クリックして検索">${{escapeHtml(record.name)}}</button></td>
            <td class="world-cell">${{escapeHtml(record.world)}}</td>
            <td class="level-cell">${{record.level}}</td>
            <td class="job-cell">${{escapeHtml(record.job)}}</td>
            <td class="timestamp-cell">${{escapeHtml(record.timestamp)}}</td>
        </tr>`).join('');
    body.querySelectorAll('.name-button').forEach(button => {{
        button.addEventListener('click', () => selectName(button.dataset.name));
    }});
    document.getElementById('noResults').style.display = rows.length === 0 ? 'block' : 'none';
}}

function renderPlayerChart(data) {{
    const container = document.getElementById('playerChartContainer');
    if (playerChart) {{
        playerChart.destroy();
        playerChart = null;
    }}
    if (!selectedName) {{
        container.style.display = 'none';
        return;
    }}
    container.style.display = 'block';
    document.getElementById('playerChartTitle').textContent = `${{selectedName}} のランキング推移`;

    const history = data.player_history[selectedName];
    const noData = document.getElementById('playerNoData');
    const info = document.getElementById('playerChartInfo');
    if (!history || history.points.length === 0) {{
        noData.style.display = 'block';
        info.innerHTML = '';
        return;
    }}
    noData.style.display = 'none';

    const points = history.points;
    const ctx = document.getElementById('playerChart').getContext('2d');
    playerChart = new Chart(ctx, {{
        type: 'line',
        data: {{
            labels: points.map(point => point.display_date),
            datasets: [
                {{
                    label: 'ランキング',
                    data: points.map(point => point.rank),
                    borderColor: '#667eea',
                    backgroundColor: '#667eea',
                    borderWidth: 3,
                    yAxisID: 'rank'
                }},
                {{
                    label: 'レベル',
                    data: points.map(point => point.level),
                    borderColor: '#4cd497',
                    backgroundColor: '#4cd497',
                    borderWidth: 3,
                    yAxisID: 'level'
                }}
            ]
        }},
        options: {{
            responsive: true,
            maintainAspectRatio: false,
            scales: {{
                rank: {{ position: 'left', reverse: true, title: {{ display: true, text: 'ランク' }} }},
                level: {{ position: 'right', title: {{ display: true, text: 'レベル' }}, grid: {{ drawOnChartArea: false }} }}
            }}
        }}
    }});

    const highlights = history.highlights;
    info.innerHTML = `
        <p>期間: ${{highlights.days}}日間のデータ</p>
        <p>最高順位: ${{highlights.best_rank}}位</p>
        <p>最新順位: ${{highlights.latest_rank}}位</p>
        <p>最高レベル: ${{highlights.best_level}}</p>
        <p>最新レベル: ${{highlights.latest_level}}</p>`;
}}

function renderWeeklyChart(data) {{
    const trend = data.weekly_trend;
    const container = document.getElementById('weeklyChartContainer');
    if (weeklyChart) {{
        weeklyChart.destroy();
        weeklyChart = null;
    }}
    if (trend.rows.length === 0) {{
        container.style.display = 'none';
        return;
    }}
    container.style.display = 'block';
    document.getElementById('weeklyTopN').textContent = trend.top_n;
    document.getElementById('weeklyTopNInfo').textContent = trend.top_n;
    document.getElementById('weeklyWindow').textContent = trend.window;

    const ctx = document.getElementById('weeklyChart').getContext('2d');
    weeklyChart = new Chart(ctx, {{
        type: 'line',
        data: {{
            labels: trend.rows.map(row => row.displayDate),
            datasets: trend.roster.map(entry => ({{
                label: entry.name,
                data: trend.rows.map(row => row[entry.name]),
                actual: trend.rows.map(row => row[`${{entry.name}}_actual`]),
                borderColor: entry.color,
                backgroundColor: entry.color,
                borderWidth: 2,
                tension: 0.3
            }}))
        }},
        options: {{
            responsive: true,
            maintainAspectRatio: false,
            scales: {{
                y: {{
                    reverse: true,
                    min: 1,
                    max: trend.top_n,
                    ticks: {{ stepSize: 1 }},
                    title: {{ display: true, text: '順位' }}
                }}
            }},
            plugins: {{
                tooltip: {{
                    callbacks: {{
                        label: context => {{
                            const actual = context.dataset.actual[context.dataIndex];
                            const display = actual !== null ? actual : '圏外';
                            return `${{context.dataset.label}}: ${{display}}位`;
                        }}
                    }}
                }}
            }}
        }}
    }});
}}

function renderDistributions(data) {{
    [levelChart, worldChart, jobChart].forEach(chart => chart && chart.destroy());
    const dist = data.distributions;
    const colors = buckets => buckets.map((_, index) => DISTRIBUTION_COLORS[index % DISTRIBUTION_COLORS.length]);

    levelChart = new Chart(document.getElementById('levelChart').getContext('2d'), {{
        type: 'pie',
        data: {{
            labels: dist.level.map(bucket => bucket.label),
            datasets: [{{ data: dist.level.map(bucket => bucket.count), backgroundColor: colors(dist.level) }}]
        }}
    }});
    worldChart = new Chart(document.getElementById('worldChart').getContext('2d'), {{
        type: 'bar',
        data: {{
            labels: dist.world.map(bucket => bucket.label),
            datasets: [{{ label: 'プレイヤー数', data: dist.world.map(bucket => bucket.count), backgroundColor: colors(dist.world) }}]
        }}
    }});
    jobChart = new Chart(document.getElementById('jobChart').getContext('2d'), {{
        type: 'bar',
        data: {{
            labels: dist.job.map(bucket => bucket.label),
            datasets: [{{ label: 'プレイヤー数', data: dist.job.map(bucket => bucket.count), backgroundColor: colors(dist.job) }}]
        }},
        options: {{ indexAxis: 'y' }}
    }});
}}

function selectName(name) {{
    selectedName = name || '';
    document.getElementById('nameInput').value = selectedName;
    const data = sourceData();
    if (data) {{
        renderTable(data);
        renderPlayerChart(data);
    }}
}}

function render() {{
    renderSources();
    const data = sourceData();
    const errorMessage = document.getElementById('errorMessage');
    if (!data || !data.has_data) {{
        errorMessage.textContent = 'データの取得に失敗しました。しばらく後にお試しください。';
        errorMessage.style.display = 'block';
        return;
    }}
    errorMessage.style.display = 'none';
    renderStats(data);
    renderNameOptions(data);
    renderTable(data);
    renderPlayerChart(data);
    renderWeeklyChart(data);
    renderDistributions(data);
}}

document.addEventListener('DOMContentLoaded', () => {{
    const initial = sourceData();
    if (initial && initial.selected_name) {{
        selectedName = initial.selected_name;
        document.getElementById('nameInput').value = selectedName;
    }}
    document.getElementById('nameInput').addEventListener('change', event => selectName(event.target.value.trim()));
    document.getElementById('clearButton').addEventListener('click', () => selectName(''));
    render();
}});
"""
