"""
Built-in sample corpus (tab-separated numbers, "English = Russian").
"""

SAMPLE_CORPUS = """\
1\tI actually don't know where Tom lives. = Вообще-то, я не знаю, где Том живёт.
2\tI admit that I’m the one that did it. = Я признаю, что это я сделала.
3\tI admit that there are a few problems. = Я признаю, что есть несколько проблем.
4\tI agree with Tom one hundred percent. = Я согласна с Томом на сто процентов.
5\tI agree with everything you just said. = Я согласна со всем, что ты только что сказала.
6\tI agree with your opinion about… = Я согласна с твоим мнением о…
7\tI already have plans for this weekend. = У меня уже есть планы на эти выходные.
8\tI already told you that it won't work. = Я уже сказала тебе, что это не сработает.
9\tI always carry a bottle of water with me. = Я всегда ношу с собой бутылку воды.
10\tI always get those two names confused. = Я всегда путаю эти два имени.
11\tI really want to live here forever. = Я действительно хочу жить здесь вечно.
12\tWhat is your favorite color? = Какой твой любимый цвет?
13\tMy favorite color is black. = Мой любимый цвет чёрный.
14\tYou found me (masc.) = Ты нашёл меня
15\tI found you = Я нашла тебя
16\tWhy are you learning Russian? = Почему ты учишь русский?
17\tI’m learning Russian because… = Я учу русский потому что…
18\tI have no idea = Я понятия не имею.
19\tI don't know how to say that in Russian. = Я не знаю, как сказать это по русски.
20\tI love that song. = Я люблю эту песню.
21\tCan I ask you a question? = Могу я задать тебе вопрос?
22\tI hate this city. = Я ненавижу этот город.
23\tI hated high school. College is so much better for me. = Я ненавидела среднюю школу. Колледж для меня намного лучше.
24\tWhat university do you study at? = В каком университете ты учишься?
25\tMy birthday is in August. = Мой день рождения в августе.
26\tI was born in Atlanta, but now I live in Los Angeles. = Я родилась в Атланте, но сейчас живу в Лос Анджелесе.
27\tI sound like a robot. = Я говорю как робот.
28\tI go to university here. = Я учусь здесь в университете.
29\tI think Russian women are especially beautiful. = Я думаю, что русские женщины особенно красивы.
30\tThat's all about me. = Это всё обо мне
31\tWhat's your major? = Какая у тебя специальность?
32\tI miss you. = Я скучаю по тебе.
33\tI'll pay for everything. = Я заплачу за все.
34\tI don’t agree that = Я не согласна, что…
35\tI feel so good = Мне так хорошо.
36\tI want to go home = Я хочу домой.
37\tI’m sorry I’m late (frm.) = Извините, я опоздала.
38\tI can’t hear you = Я тебя не слышу.
39\tHold on = Подожди.
40\tI can’t find my package. = Я не могу найти свою посылку.
"""
