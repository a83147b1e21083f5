import io
from unittest.mock import patch

from plotly.offline import get_plotlyjs_version

from painel_docente.core import agregacao
from painel_docente.core.constants import FORMULARIO_INICIAL, MATERIAS_INICIAIS

CONFIRMAR = {'confirmar': 'تأكيد'}


def _texto(response):
    return response.data.decode('utf-8')


def _estrategia(estado, id_estrategia):
    return next(e for e in estado.formulario['strategies'] if e['id'] == id_estrategia)


def test_health_check(client):
    """Teste da rota de health check."""
    response = client.get('/health')
    assert response.status_code == 200
    assert b"Painel Docente no ar!" in response.data


def test_404_page(client):
    response = client.get('/rota-que-nao-existe')
    assert response.status_code == 404
    assert b"404" in response.data
    assert "الصفحة غير موجودة" in _texto(response)


def test_dashboard_carrega_seed(client):
    response = client.get('/')
    assert response.status_code == 200
    conteudo = _texto(response)
    assert 'dir="rtl"' in conteudo
    assert 'font-size: 16px' in conteudo
    assert FORMULARIO_INICIAL['teacher_name'] in conteudo
    assert 'الجكسو' in conteudo


# === INFORMAÇÕES GERAIS E CONTADORES ===

def test_salvar_geral(client, estado):
    response = client.post('/geral', data={
        'teacher_name': 'أ. سارة',
        'semester': 'الفصل الدراسي الثاني',
        'grade': 'الصف 9',
        'subject': 'الرياضيات',
        'units': '',
        'lessons': '-3',
    }, follow_redirects=True)
    assert response.status_code == 200
    form = estado.formulario
    assert form['teacher_name'] == 'أ. سارة'
    assert form['grade'] == 'الصف 9'
    assert form['units'] == 0
    assert form['lessons'] == 0
    assert 'تم حفظ المعلومات الأساسية.' in _texto(response)


def test_salvar_geral_rejeita_materia_fora_da_lista(client, estado):
    client.post('/geral', data={
        'teacher_name': 'X',
        'semester': FORMULARIO_INICIAL['semester'],
        'grade': FORMULARIO_INICIAL['grade'],
        'subject': 'مادة غير موجودة',
        'units': '1',
        'lessons': '1',
    })
    assert estado.formulario['teacher_name'] == FORMULARIO_INICIAL['teacher_name']


def test_salvar_contadores(client, estado):
    client.post('/contadores/resource_rooms', data={
        'library': '7', 'showroom': 'abc', 'interactive_board': '-1', 'science_lab': '2', 'other': '',
    })
    assert estado.formulario['resource_rooms'] == {
        'library': 7, 'showroom': 0, 'interactive_board': 0, 'science_lab': 2, 'other': 0,
    }


def test_categoria_desconhecida(client):
    assert client.post('/contadores/inexistente', data={}).status_code == 404


# === ESTRATÉGIAS ===

def test_excluir_e_adicionar_estrategia(client, estado):
    total_antes = agregacao.totais_estrategias(estado.formulario)['active']

    # GET mostra a confirmação sem excluir
    response = client.get('/estrategias/1/excluir')
    assert response.status_code == 200
    assert 'اشطب وربح' in _texto(response)
    assert _estrategia(estado, 1)

    # POST sem confirmar também não exclui
    client.post('/estrategias/1/excluir', data={})
    assert any(e['id'] == 1 for e in estado.formulario['strategies'])

    client.post('/estrategias/1/excluir', data=CONFIRMAR)
    client.post('/estrategias', data={})

    form = estado.formulario
    ids = [e['id'] for e in form['strategies']]
    assert 1 not in ids
    assert ids[-1] == 22
    assert form['strategies'][-1]['name'] == ''
    assert agregacao.totais_estrategias(form)['active'] == total_antes - 3


def test_editar_estrategia(client, estado):
    client.post('/estrategias/2', data={
        'name': 'التعلم التعاوني', 'traditional': '', 'active': '-3', 'research': '6',
    })
    estrategia = _estrategia(estado, 2)
    assert estrategia['name'] == 'التعلم التعاوني'
    assert estrategia['traditional'] == 0
    assert estrategia['active'] == 0
    assert estrategia['research'] == 6


def test_editar_estrategia_sem_nome_grava_texto_vazio(client, estado):
    client.post('/estrategias/2', data={'active': '5'})
    estrategia = _estrategia(estado, 2)
    assert estrategia['name'] == ''
    assert estrategia['active'] == 5
    assert client.get('/').status_code == 200
    assert client.get('/relatorios/').status_code == 200


def test_formulario_gravado_incompleto_volta_ao_seed(data_dir, nova_app):
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / 'form-data.json').write_text('{"teacher_name": "x"}', encoding='utf-8')

    client = nova_app().test_client()
    response = client.get('/')
    assert response.status_code == 200
    assert FORMULARIO_INICIAL['teacher_name'] in _texto(response)
    assert client.get('/relatorios/').status_code == 200


def test_estrategia_inexistente(client):
    assert client.post('/estrategias/999', data={'name': 'x'}).status_code == 404
    assert client.get('/estrategias/999/excluir').status_code == 404


def test_ordenar(client):
    client.get('/ordenar/active')
    with client.session_transaction() as sess:
        assert sess['ordenacao'] == {'coluna': 'active', 'direcao': 'ascending'}

    client.get('/ordenar/active')
    with client.session_transaction() as sess:
        assert sess['ordenacao']['direcao'] == 'descending'

    response = client.get('/')
    assert '▼' in _texto(response)


def test_ordenar_coluna_invalida(client):
    assert client.get('/ordenar/name').status_code == 404


def test_descricao_exige_nome(client, estado):
    # A linha 14 do seed não tem nome
    response = client.get('/estrategias/14/descricao', follow_redirects=True)
    assert 'أدخل اسم الاستراتيجية أولاً.' in _texto(response)


def test_gerar_descricao_sem_chave(client, estado):
    response = client.post('/estrategias/1/descricao/gerar', data={'description': ''})
    assert response.status_code == 200
    assert 'مفتاح API غير مهيأ' in _texto(response)
    assert _estrategia(estado, 1)['description'] == ''


@patch('painel_docente.dashboard.routes.descrever_estrategia')
def test_gerar_descricao_preenche_sem_gravar(mock_descrever, client, estado):
    mock_descrever.return_value = 'استراتيجية تعتمد على المنافسة.'

    response = client.post('/estrategias/1/descricao/gerar', data={'description': ''})
    assert 'استراتيجية تعتمد على المنافسة.' in _texto(response)
    mock_descrever.assert_called_once_with('اشطب وربح')
    assert _estrategia(estado, 1)['description'] == ''

    client.post('/estrategias/1/descricao', data={'description': 'استراتيجية تعتمد على المنافسة.'})
    assert _estrategia(estado, 1)['description'] == 'استراتيجية تعتمد على المنافسة.'


@patch('painel_docente.core.assistente.gerar_texto')
def test_sugerir_adiciona_estrategia(mock_gerar, client, estado):
    mock_gerar.return_value = 'لعب الأدوار'
    response = client.post('/estrategias/sugerir', data={}, follow_redirects=True)
    nova = estado.formulario['strategies'][-1]
    assert nova['id'] == 22
    assert nova['name'] == 'لعب الأدوار'
    assert (nova['traditional'], nova['active'], nova['research']) == (0, 0, 0)
    assert 'لعب الأدوار' in _texto(response)


@patch('painel_docente.core.assistente.gerar_texto')
def test_sugerir_repetida_nao_adiciona(mock_gerar, client, estado):
    mock_gerar.return_value = ' القصة '
    response = client.post('/estrategias/sugerir', data={}, follow_redirects=True)
    assert len(estado.formulario['strategies']) == 21
    assert 'موجودة بالفعل' in _texto(response)


def test_sugerir_sem_chave(client, estado):
    response = client.post('/estrategias/sugerir', data={}, follow_redirects=True)
    assert len(estado.formulario['strategies']) == 21
    assert 'مفتاح API غير مهيأ' in _texto(response)


# === RELATÓRIOS ===

def test_relatorio(client):
    response = client.get('/relatorios/')
    assert response.status_code == 200
    conteudo = _texto(response)
    assert FORMULARIO_INICIAL['teacher_name'] in conteudo
    assert '<td>46</td>' in conteudo
    # Estratégia nomeada, mesmo com contadores zerados
    assert 'ارسم ما تسمع' in conteudo
    # plotly.js do CDN na versão do pacote plotly instalado
    assert f"https://cdn.plot.ly/plotly-{get_plotlyjs_version()}.min.js" in conteudo


def test_relatorio_cone_vazio(client):
    client.post('/contadores/experience_cone', data={
        'verbal_symbols': '0', 'visual_symbols': '0', 'sensory_observation': '0',
        'alternative_experiences': '0', 'direct_experiences': '0',
    })
    response = client.get('/relatorios/')
    assert 'لا توجد بيانات لعرضها.' in _texto(response)


def test_analise_sem_chave(client):
    response = client.post('/relatorios/analise', data={})
    assert response.status_code == 200
    assert 'مفتاح API غير مهيأ' in _texto(response)


@patch('painel_docente.reports.routes.gerar_relatorio_narrativo')
def test_analise_renderiza_markdown(mock_relatorio, client):
    mock_relatorio.return_value = '**ملخص الأداء**\nأداء جيد.'
    response = client.post('/relatorios/analise', data={})
    conteudo = _texto(response)
    assert '<strong>ملخص الأداء</strong><br />أداء جيد.' in conteudo

    # A análise não fica gravada
    assert 'ملخص الأداء' not in _texto(client.get('/relatorios/'))


# === CONFIGURAÇÕES ===

def test_tamanho_fonte_persiste(client, estado, nova_app):
    client.post('/configuracoes/fonte', data={'tamanho': '12'})
    assert estado.tamanho_fonte == 12

    reaberta = nova_app()
    assert reaberta.extensions['estado'].tamanho_fonte == 12
    response = reaberta.test_client().get('/')
    assert 'font-size: 12px' in _texto(response)


def test_tamanho_fonte_limitado(client, estado):
    client.post('/configuracoes/fonte', data={'tamanho': '30'})
    assert estado.tamanho_fonte == 22


def test_salvar_escola(client, estado):
    response = client.post('/configuracoes/escola', data={
        'name': 'مدرسة النور', 'branch': 'فرع البنات', 'academic_year': '2026/2027',
    }, follow_redirects=True)
    assert estado.escola['name'] == 'مدرسة النور'
    assert estado.escola['logo'] is None
    assert 'مدرسة النور' in _texto(response)


def test_enviar_logo(client, estado):
    client.post('/configuracoes/logo', data={
        'logo': (io.BytesIO(b'\x89PNG\r\n\x1a\nfake'), 'logo.png'),
    }, content_type='multipart/form-data')
    assert estado.escola['logo'].startswith('data:image/png;base64,')


def test_enviar_logo_rejeita_nao_imagem(client, estado):
    client.post('/configuracoes/logo', data={
        'logo': (io.BytesIO(b'texto'), 'notas.txt'),
    }, content_type='multipart/form-data')
    assert estado.escola['logo'] is None


def test_importar_apenas_informa(client, estado):
    antes = estado.snapshot()
    response = client.post('/configuracoes/importar', data={}, follow_redirects=True)
    assert 'Excel' in _texto(response)
    assert estado.snapshot() == antes


def test_materias(client, estado):
    client.post('/configuracoes/materias', data={'nome': '  الفيزياء  '})
    assert estado.materias == [*MATERIAS_INICIAIS, 'الفيزياء']

    response = client.post('/configuracoes/materias', data={'nome': 'الفيزياء'}, follow_redirects=True)
    assert estado.materias.count('الفيزياء') == 1
    assert 'المادة موجودة بالفعل.' in _texto(response)


def test_excluir_materia_mantem_formulario(client, estado):
    response = client.get('/configuracoes/materias/excluir', query_string={'nome': 'اللغة العربية'})
    assert response.status_code == 200
    assert 'اللغة العربية' in estado.materias

    client.post('/configuracoes/materias/excluir', data={'nome': 'اللغة العربية', **CONFIRMAR})
    assert 'اللغة العربية' not in estado.materias
    # A matéria gravada no formulário não é reconciliada
    assert estado.formulario['subject'] == 'اللغة العربية'
    assert client.get('/').status_code == 200


def test_resetar(client, estado):
    client.post('/estrategias/3/excluir', data=CONFIRMAR)
    client.post('/configuracoes/fonte', data={'tamanho': '20'})
    client.get('/ordenar/active')

    response = client.post('/configuracoes/resetar', data=CONFIRMAR, follow_redirects=True)
    assert response.status_code == 200
    assert 'تمت إعادة تعيين جميع البيانات بنجاح.' in _texto(response)
    assert estado.formulario == FORMULARIO_INICIAL
    assert estado.tamanho_fonte == 16
    with client.session_transaction() as sess:
        assert 'ordenacao' not in sess


def test_resetar_exige_confirmacao(client, estado):
    client.post('/configuracoes/fonte', data={'tamanho': '20'})
    response = client.get('/configuracoes/resetar')
    assert response.status_code == 200
    client.post('/configuracoes/resetar', data={})
    assert estado.tamanho_fonte == 20


# === NOTIFICAÇÕES ===

def test_dispensar_notificacao(client, app):
    client.post('/configuracoes/fonte', data={'tamanho': '18'})
    central = app.extensions['notificacoes']
    [notificacao] = central.ativas()
    assert notificacao.tipo == 'info'

    response = client.post(f'/notificacoes/{notificacao.id}/dispensar')
    assert response.status_code == 302
    assert central.ativas() == []
