"""Static name lists used by the enricher.

Every list is lowercased and frozen at import time. Ordered mappings are
tuples of ``(tag, names)`` pairs because the first match wins for
single-valued attributes such as the language origin.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


def _names(text: str) -> FrozenSet[str]:
    return frozenset(word.lower() for word in text.split())


# --- Religious associations (per gender) ---

RELIGIOUS_NAMES: Mapping[str, Mapping[str, FrozenSet[str]]] = MappingProxyType({
    "christianity": MappingProxyType({
        "M": _names("""
            Aaron Abel Abraham Adam Andrew Anthony Benjamin Caleb Daniel David Elijah Ethan
            Gabriel Isaac Jacob James John Jonathan Joseph Joshua Luke Mark Matthew Michael
            Nathan Noah Paul Peter Samuel Simon Stephen Thomas Timothy William Zachary
            Alexander Christopher Nicholas Christian Dominic Francis Gregory Jeremy Jeremiah
            Nathaniel Sebastian
        """),
        "F": _names("""
            Abigail Anna Bethany Catherine Elizabeth Esther Grace Hannah Hope Joy Judith Leah
            Mary Miriam Naomi Rachel Rebecca Ruth Sarah Tabitha Faith Charity Patience Prudence
            Temperance Verity Constance Felicity Mercy Serenity Trinity Victoria Amanda
            Christina Christine Claire
        """),
    }),
    "judaism": MappingProxyType({
        "M": _names("""
            Aaron Abraham Adam Benjamin Daniel David Elijah Ethan Gabriel Isaac Jacob Jonathan
            Joshua Levi Michael Nathan Noah Samuel Simon Solomon Zachary Ariel Asher Caleb Eli
            Ezra Gideon Jeremiah Jonah Joseph Judah Mordecai Moses Reuben Simeon Tobias
        """),
        "F": _names("""
            Abigail Esther Hannah Leah Miriam Naomi Rachel Rebecca Ruth Sarah Deborah Dinah Eve
            Judith Lydia Martha Mary Phoebe Priscilla Susanna Tamar Zipporah Adina Ariel Aviva
            Chaya Eliana Hadassah Ilana Leora Malka Nava Rivka Shoshana Talia Yael Zara
        """),
    }),
    "islam": MappingProxyType({
        "M": _names("""
            Ahmad Ali Amir Anwar Ayman Bilal Farid Hakim Hassan Ibrahim Idris Imran Ismail Jabir
            Khalid Mahmud Malik Mansur Muhammad Nabil Omar Rashid Salman Tariq Umar Usman Yusuf
            Zaid Abdullah Abdul Ahmed
        """),
        "F": _names("Aisha Amina Fatima Khadija Maryam Zainab Aaliyah"),
    }),
    "hinduism": MappingProxyType({
        "M": _names("""
            Arjun Krishna Rama Shiva Vishnu Ganesh Hanuman Lakshman Bharat Shatrughna Aarav
            Aryan Dhruv Ishaan Kabir Karan Krish Manav Neel Pranav Rohan Rudra Siddharth Ved
            Vikram Yash Zain Aditya Akash Aman Ankit Arnav Chirag Deepak Gaurav Harsh Jatin
            Kunal Manoj
        """),
        "F": _names("""
            Priya Kavya Ananya Ishita Saanvi Aadhya Aanya Aaradhya Anika Anvi Diya Ira Kiara
            Maya Meera Navya Pari Riya Sara Shreya Sia Tara Vanya Zara Aditi Amara Anaya Aria
            Asha Bhavya Chaya Disha Esha Gauri Hema Indira Jaya Lakshmi Nisha
        """),
    }),
    "buddhism": MappingProxyType({
        "M": _names("Bodhi Dharma Karma Nirvana Siddhartha Buddha Ananda Arjuna Ashoka"),
        "F": _names("Bodhi Dharma Karma Nirvana Siddhartha Buddha Ananda Arjuna Ashoka"),
    }),
    "sikhism": MappingProxyType({
        "M": _names("""
            Gurpreet Harpreet Jaspreet Manpreet Rajpreet Simran Aman Arjun Bhavin Charan
            Dilpreet Gurdeep Harman Jasbir Karan Lakhbir Manjit Navdeep Prabhdeep Rajdeep
            Sukhdeep Taran Ujjal Vikram Yuvraj Zorawar Akal Bhai Darshan Ekam Fateh Gur Hari
            Ishwar Jap Kirat
        """),
        "F": _names("""
            Gurpreet Harpreet Jaspreet Manpreet Rajpreet Simran Aman Charan Dilpreet Gurdeep
            Harman Jasbir Navdeep Prabhdeep Rajdeep Sukhdeep Taran Ekam Kirat Amrit Harleen
            Jasleen Navneet
        """),
    }),
    "greek": MappingProxyType({
        "M": _names("""
            Alexander Andreas Dimitri Elias Gabriel Jason Nicholas Theodore Zachary Adonis
            Apollo Atlas Dionysus Hector Hercules Odysseus Perseus Theseus Zeus Achilles
            Agamemnon Ajax Anton Aristotle Demetrius Evander Gregory Icarus Leonidas Marcus
            Nestor Orion Phoenix Socrates
        """),
        "F": _names("""
            Alexandra Athena Diana Elena Grace Helen Iris Luna Phoebe Sophia Aphrodite Artemis
            Calliope Cassandra Juno Minerva Selene Thea Venus Zoe Ariadne Calypso Circe Demeter
            Echo Gaia Hera Kore Leto
        """),
    }),
    "norse": MappingProxyType({
        "M": _names("""
            Erik Bjorn Gunnar Leif Magnus Olaf Ragnar Sven Thor Ulf Ake Anders Axel Gustav Hans
            Ingvar Johan Karl Lars Nils Olav Per Rolf Sten Tore Vidar Yngve
        """),
        "F": _names("""
            Astrid Freya Ingrid Sigrid Solveig Thora Ursula Valkyrie Ylva Zara Agneta Birgitta
            Cecilia Dagny Elin Gunhild Helga Jorunn Karin Liv Maren Nora Oda Petra Ragnhild Tora
        """),
    }),
    "celtic": MappingProxyType({
        "M": _names("""
            Aidan Brendan Connor Declan Finn Liam Owen Patrick Sean Tristan Aengus Bran Cian
            Darragh Eamon Fergus Gareth Hugh Ian Jarlath Keegan Lorcan Niall Oisin Padraig Quinn
            Ronan Shane Tadhg
        """),
        "F": _names("""
            Aisling Bridget Caitlin Deirdre Eileen Fiona Grainne Hannah Iona Kiera Aine Brigid
            Ciara Eilis Fionnuala Laoise Maeve Niamh Orla Quinn Roisin Saoirse Tara Una
        """),
    }),
})

CROSS_RELIGIOUS_NAMES = _names("""
    David Gabriel Michael Noah Isaac Abraham Adam Aaron Benjamin Daniel Elijah Ethan Jacob
    Joshua Samuel Simon Thomas William Zachary Alexander Christopher Nicholas Christian
    Dominic Francis Gregory Jeremy Jeremiah Nathaniel Sebastian Abigail Anna Elizabeth
    Esther Grace Hannah Hope Joy Judith Leah Mary Miriam Naomi Rachel Rebecca Ruth Sarah
    Tabitha Faith Charity Patience Prudence Temperance Verity Constance Felicity Mercy
    Serenity Trinity Victoria Amanda Christina Christine
""")

# --- Cultural origins ---

CULTURAL_ORIGINS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("arabic", _names("Aaliyah Aisha Amina Fatima Khadija Maryam Zainab Ahmad Ali Amir Omar Yusuf Layla Samir")),
    ("hebrew", _names("Aaron Abraham Adam Benjamin Daniel David Elijah Ethan Gabriel Isaac Levi Noa Yael")),
    ("sanskrit", _names("Arjun Krishna Rama Shiva Vishnu Ganesh Hanuman Aarav Aryan Dhruv Priya Ananya")),
    ("greek", _names("Alexander Andreas Dimitri Elias Gabriel Jason Nicholas Theodore Zachary Sophia Zoe Penelope")),
    ("latin", _names("Augustus Caesar Marcus Maximus Roman Victor Victoria Felix Lucius Quintus Julia Aurelia")),
    ("germanic", _names("Adolf Bruno Conrad Frederick Gunther Hans Klaus Otto Rudolf Wolfgang Matilda Greta")),
    ("celtic", _names("Aidan Brendan Connor Declan Finn Liam Owen Patrick Sean Tristan Maeve Niamh")),
    ("slavic", _names("Boris Dmitri Igor Mikhail Nikolai Pavel Sergei Vladimir Yuri Natasha Svetlana Milena")),
    ("norse", _names("Erik Bjorn Gunnar Leif Magnus Olaf Ragnar Sven Thor Ulf Astrid Freya")),
)

# --- Language origin (first match wins, default english) ---

DEFAULT_LANGUAGE = "english"

LANGUAGE_ORIGINS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("spanish", _names("""
        Alejandro Carlos Diego Jose Juan Luis Miguel Pablo Santiago Mateo Javier Jorge Rafael
        Sofia Valentina Camila Lucia Isabela Mariana Ximena Guadalupe Carmen Dolores Pilar
        Rosa Alejandra Esperanza Catalina
    """)),
    ("chinese", _names("Wei Ming Jun Hao Lei Yan Mei Ling Xin Hui Jia Zhen Jian Bao Lian Xiu Chen")),
    ("filipino", _names("Jericho Rizal Mayumi Marites Bituin Dalisay Ligaya Mahalia Tala Amihan Bayani Dakila")),
    ("vietnamese", _names("Nguyen Minh Anh Linh Huong Thanh Tuan Duc Trang Phuong Quang Khanh Lan Hoa Vinh")),
    ("korean", _names("Jiwoo Minjun Seojun Jihoon Hyun Sung Jisoo Minji Yuna Seoyeon Eunji Haeun Dohyun")),
    ("japanese", _names("Hiroshi Takeshi Kenji Haruto Yuki Sakura Hana Aiko Yumi Akira Ren Sora Kaito Emi Hinata")),
    ("hindi", _names("""
        Aarav Arjun Rohan Vikram Rahul Sanjay Ravi Amit Anil Priya Ananya Kavya Saanvi Aadhya
        Diya Shreya Pooja Neha Deepika Lakshmi Anjali Sunita Raj Krishna Ishaan Aditya
    """)),
    ("arabic", _names("""
        Muhammad Mohammed Ahmad Ahmed Ali Omar Yusuf Khalid Hassan Ibrahim Tariq Bilal Hamza
        Aisha Fatima Khadija Amina Zainab Maryam Layla Noor Yasmin Samira Aaliyah Abdullah
    """)),
    ("hebrew", _names("Avi Yael Shira Moshe Yosef Chaim Shlomo Tzvi Noa Ayelet Rivka Shoshana Mordecai Yitzhak Eliezer")),
    ("french", _names("""
        Pierre Jacques Jean Louis Francois Antoine Etienne Henri Amelie Colette Genevieve
        Juliette Margaux Celine Camille Elodie Brigitte Sylvie Mathieu Remy
    """)),
    ("german", _names("Hans Klaus Wolfgang Dieter Jurgen Fritz Heinrich Gunther Otto Greta Heidi Liesel Gretchen Ilse Anke Frieda")),
    ("italian", _names("""
        Giovanni Giuseppe Marco Luca Matteo Lorenzo Alessandro Francesco Antonio Giulia Chiara
        Francesca Giovanna Alessia Bianca Rosa Gianna Vincenzo Enzo Dante Paolo
    """)),
    ("russian", _names("Dmitri Ivan Sergei Vladimir Mikhail Nikolai Alexei Boris Igor Yuri Natasha Olga Svetlana Tatiana Anastasia Katya")),
    ("polish", _names("Jakub Kacper Wojciech Tomasz Krzysztof Piotr Agnieszka Katarzyna Malgorzata Zofia Zuzanna Wiktoria Jadwiga")),
    ("greek", _names("Dimitri Nikos Giorgos Konstantinos Yiannis Stavros Spiros Athena Eleni Despina Katerina Penelope Calliope")),
    ("irish", _names("""
        Aidan Liam Sean Declan Cian Ronan Niall Padraig Tadhg Oisin Eoin Darragh Siobhan Niamh
        Saoirse Aoife Roisin Caoimhe Grainne Maeve Aisling Orla Ciara Deirdre
    """)),
    ("scandinavian", _names("Erik Bjorn Lars Sven Nils Leif Gunnar Magnus Astrid Ingrid Freya Sigrid Solveig Liv Annika Elin")),
    ("yoruba", _names("Ayodele Babajide Oluwaseun Olumide Temitope Adebayo Folasade Funmilayo Titilayo Yetunde Abimbola Oluwadamilare")),
    ("amharic", _names("Abebe Dawit Tesfaye Haile Yonas Kidus Selam Tigist Meron Hiwot Mekdes Liya Bethlehem")),
    ("haitian_creole", _names("Jean-Baptiste Wilner Jocelyn Fabiola Guerline Nadege Widline Rodeline Nerlande Wesly Stanley Jodeline")),
    ("portuguese", _names("Joao Tiago Rodrigo Goncalo Duarte Afonso Leonor Beatriz Ines Mariana Conceicao Fernanda Thiago")),
    ("latin", _names("Augustus Maximus Lucius Quintus Cassius Aurelius Octavia Aurelia Livia Cornelia Valeria")),
    ("welsh", _names("Rhys Gareth Dylan Emrys Idris Aled Bronwen Carys Gwen Rhiannon Seren Eira Megan")),
    ("scottish", _names("Alasdair Angus Callum Duncan Ewan Fraser Hamish Lachlan Ailsa Isla Kirsty Morag Skye Eilidh")),
    ("dutch", _names("Jan Pieter Daan Sem Bram Joris Sanne Femke Anouk Lotte Maartje Willem Hendrik")),
    ("turkish", _names("Emre Mehmet Mustafa Burak Kerem Ayse Elif Zeynep Deniz Ozlem Selin Cem")),
    ("persian", _names("Darius Cyrus Arash Kian Reza Babak Dariush Shirin Roxana Parisa Soraya Yasaman Azadeh")),
    ("swahili", _names("Jabari Baraka Juma Kito Zuberi Amani Imani Zawadi Neema Nia Malaika Rehema")),
    ("hawaiian", _names("Kai Keanu Makoa Koa Kale Leilani Malia Kalani Noelani Moana Nalani Keala Mahina")),
    ("armenian", _names("Aram Armen Tigran Hayk Levon Narek Ani Anahit Lusine Nare Mariam Sona")),
)

# Continent-level tags for the cultural background question.
LANGUAGE_CONTINENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "english": ("europe", "north-america"),
    "spanish": ("europe", "central-america", "south-america"),
    "chinese": ("asia",),
    "filipino": ("asia",),
    "vietnamese": ("asia",),
    "korean": ("asia",),
    "japanese": ("asia",),
    "hindi": ("asia",),
    "arabic": ("asia", "africa"),
    "hebrew": ("asia",),
    "french": ("europe",),
    "german": ("europe",),
    "italian": ("europe",),
    "russian": ("europe", "asia"),
    "polish": ("europe",),
    "greek": ("europe",),
    "irish": ("europe",),
    "scandinavian": ("europe",),
    "yoruba": ("africa",),
    "amharic": ("africa",),
    "haitian_creole": ("central-america",),
    "portuguese": ("europe", "south-america"),
    "latin": ("europe",),
    "welsh": ("europe",),
    "scottish": ("europe",),
    "dutch": ("europe",),
    "turkish": ("asia",),
    "persian": ("asia",),
    "swahili": ("africa",),
    "hawaiian": ("oceania",),
    "armenian": ("asia",),
})

ORIGIN_CONTINENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "arabic": ("asia", "africa"),
    "hebrew": ("asia",),
    "sanskrit": ("asia",),
    "greek": ("europe",),
    "latin": ("europe",),
    "germanic": ("europe",),
    "celtic": ("europe",),
    "slavic": ("europe",),
    "norse": ("europe",),
})

# --- Traditional significance ---

CLASSIC_NAMES = _names("""
    Elizabeth Mary Margaret Catherine Anne Alice Eleanor Frances Jane Helen Dorothy Edith
    Florence Harriet Beatrice Charlotte Victoria Louisa Clara Ruth Esther Rebecca Sarah
    Hannah Martha Abigail Judith Miriam John William James George Edward Henry Charles
    Thomas Robert Richard Joseph Arthur Albert Frederick Walter Francis Samuel Benjamin
    Theodore Alexander Peter Paul Andrew Matthew Philip Hugh Lewis Augustus Julius Marcus
    Octavia Julia Cornelia Constance Agnes Rose
""")

MODERN_NAMES = _names("""
    Jayden Brayden Kayden Aiden Jaxon Jaxson Maverick Ryker Zayden Bentley Kinsley Paisley
    Nevaeh Aubree Kaylee Khaleesi Nova Mila Harper Skylar Brooklynn Everleigh Oaklynn Raelynn
    Adalynn Braxton Colt Kash Legend Zion Ezra Luna Aria Willow Hazel Rylee Brynlee Kenzie
    Maddox Knox Ace Jett Remington Royalty Journey Serenity
""")

# --- Socioeconomic tiers ---

ELITE_NAMES = _names("""
    Alexander Charlotte William Elizabeth Catherine Victoria Theodore Eleanor Henry Margaret
    Edward Philippa Beatrice Sebastian Winston Penelope Genevieve Arabella Cordelia Octavia
    Frederick Harrison Charles Josephine Caroline Julian Louisa Montgomery Prescott Sterling
    Whitney Spencer Preston Emmeline Imogen Rupert Hugo
""")

ASPIRATIONAL_NAMES = _names("""
    Nevaeh Jayden Brayden Kayden Destiny Diamond Mercedes Lexus Princess Krystal Brittany
    Jaxon Jaxson Kaylee Khaleesi Unique Precious Miracle Neveah Armani Bentley Royalty
    Heaven Tiffany Crystal Chastity Dakota Tanner Brantley Kasen
""")

# --- Perceived traits (how people perceive the name) ---

DEFAULT_PERCEIVED_TRAIT = "friendly"

PERCEIVED_TRAITS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("elegant", _names("Charlotte Sophia Isabella Genevieve Juliette Audrey Vivienne Eleanor Victoria Seraphina Olivia Evelyn Amelia")),
    ("strong", _names("Alexander Maximus Magnus Hunter Bruno Thor Jack Max Xander Brock Matilda Valentina Bridget Ryker Axel")),
    ("friendly", _names("Sam Ben Molly Annie Katie Danny Jamie Charlie Billy Lucy Rosie Tommy Jenny Ellie Joey")),
    ("intelligent", _names("Theodore Sebastian Nathaniel Eleanor Minerva Sophia Athena Albert Isaac Edmund Ada Marie Beatrice")),
    ("creative_perceived", _names("River Indigo Juniper Luna Orion Sage Phoenix Wren Lyric Harmony Aria Willow Atlas")),
    ("unique", _names("Zephyr Xanthe Quill Ximena Thaddeus Ottoline Caspian Calliope Eulalia Peregrine Rainier Saoirse Nevaeh")),
    ("traditional_perceived", _names("John Mary William Elizabeth James Margaret Robert Catherine George Anne Charles Thomas")),
    ("modern", _names("Jayden Brayden Aiden Kaylee Paisley Nova Mila Harper Jaxon Kinsley Ryker Maverick Skylar")),
    ("natural", _names("Willow Rowan Hazel Ivy River Forest Sage Fern Aspen Juniper Cedar Daisy Rose Lily Clay")),
    ("trustworthy", _names("David Michael Daniel Sarah Emily Matthew Andrew Anna Grace Hannah Joseph Paul Ruth")),
)

# --- Desired impression ---

DEFAULT_DESIRED_TRAIT = "warmth"

DESIRED_TRAITS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("authority", _names("Alexander Victoria Maximilian Augustus Winston Elizabeth Margaret Catherine Henry Charles Theodore Regina")),
    ("strength_desired", _names("Magnus Hunter Axel Thor Bruno Valentina Matilda Bridget Gunnar Brock Xander Audrey Ryker")),
    ("warmth", _names("Grace Joy Hope Molly Annie Ben Sam Charlie Lucy Rosie Daisy Emma Lily Jamie")),
    ("intelligence_desired", _names("Theodore Sebastian Athena Minerva Sophia Eleanor Isaac Albert Ada Marie Edmund Solomon")),
    ("creativity_desired", _names("Indigo Lyric Harmony Aria Juniper Orion Phoenix Wren Luna River Sage Jazz")),
    ("uniqueness_desired", _names("Zephyr Caspian Xanthe Ottoline Calliope Peregrine Thaddeus Quill Eulalia Rainier Nevaeh")),
    ("tradition_desired", _names("John Mary William Elizabeth James Margaret Anne George Thomas Catherine Edward Alice")),
    ("nature_connection", _names("Willow River Forest Sage Fern Aspen Juniper Cedar Hazel Ivy Rowan Daisy Rose Lily Clay")),
)

# --- Typical reactions ---

DEFAULT_REACTION = "neutral"

TYPICAL_REACTIONS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("loved", _names("Olivia Amelia Charlotte Luna Aurora Isla Evelyn Oliver Theodore Leo Ezra Sebastian")),
    ("spelling_questions", _names("Siobhan Niamh Saoirse Aoife Caoimhe Aisling Tadhg Oisin Xzavier Jaxon Kaitlyn Brittani Khaleesi")),
    ("memorable", _names("Luna Nova Zara Max Leo Kai Ivy Zoe Jax Ace Axel Ezra")),
    ("jokes", _names("Harry Dick Candy Sandy Rusty Jimmy Bob Chip Buck Chuck Gene Sunny")),
    ("trustworthy_reaction", _names("David Michael Daniel Sarah Emily Matthew Andrew Anna Grace Hannah Joseph Paul")),
    ("old_fashioned", _names("Gertrude Mildred Ethel Agnes Bertha Edna Harold Herbert Walter Eugene Myrtle Clarence")),
    ("unique_reaction", _names("Zephyr Caspian Xanthe Ottoline Calliope Peregrine Thaddeus Quill Eulalia Rainier Nevaeh")),
    ("traditional_reaction", _names("John Mary William Elizabeth James Margaret Robert Catherine George Anne Charles Thomas")),
    ("modern_reaction", _names("Jayden Brayden Aiden Kaylee Paisley Nova Mila Harper Jaxon Kinsley Ryker Maverick")),
    ("origin_questions", _names("Siobhan Saoirse Oluwaseun Ximena Anahit Yasaman Zuberi Keanu Leilani Priya Dmitri Ayelet")),
    ("strong_reaction", _names("Alexander Magnus Hunter Axel Thor Bruno Gunnar Brock Maximus Valentina Matilda")),
)

# --- Name meaning ---

DEFAULT_MEANING = "sound"

NAME_MEANINGS: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("royal", _names("Regina Rex Reign Basil Sarah Elroy Leroy Rory Ryan Kingston Malik Malika Rani Raja Elmer")),
    ("nature", _names("Willow Rowan Hazel Ivy Fern Aspen Juniper Cedar Daisy Rose Lily Violet Jasmine Forest Oakley")),
    ("warrior", _names("Alexander Louis Gunnar Marcus Matilda Bridget Andrew Ethan Kane Ryker Mars Takeshi Valentina")),
    ("light", _names("Helen Elena Lucy Lucia Lucas Nora Eleanor Ciara Noor Uriel Roxana Zia Aurora Phoebe")),
    ("love", _names("Amy Amanda Carys Mabel Philip Esme David Priya Aimee Amara Cara Davina")),
    ("wisdom", _names("Sophia Sophie Minerva Athena Solomon Conrad Alfred Hugo Raymond Sage Tomoko")),
    ("music", _names("Lyric Melody Harmony Aria Cadence Carmen Cecilia Jubal Piper Allegra")),
    ("water", _names("River Marina Dylan Kai Moana Brook Delmar Morgan Murray Neptune Nerissa Ondine")),
    ("fire", _names("Aiden Ignatius Blaise Brenna Kenneth Nina Seraphina Aidan Ember Keegan")),
    ("moon", _names("Luna Selene Diana Celeste Chandra Mahina Phoebe Hilal Artemis Cynthia")),
    ("sun", _names("Sunny Sol Helios Sunita Samson Apollo Ravi Elio Aurelia Soleil")),
    ("peace", _names("Irene Frederick Salome Shiloh Paz Callum Winifred Solomon Serena Axel Freda")),
    ("creative", _names("Indigo Juniper Orion Phoenix Wren Atlas Jazz Poet Story Bard")),
)

# --- Geographic preference (community type tags) ---

DEFAULT_COMMUNITY = "suburban_community"

GEOGRAPHIC_PREFERENCES: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("rural_community", _names("Colt Wyatt Waylon Hank Luke Daisy Clementine Jolene Tucker Beau Maverick Bentley Paisley")),
    ("urban_community", _names("Jayden Zion Isaiah Malik Aaliyah Imani Luca Milan London Brooklyn Kingston Aria")),
    ("coastal_community", _names("Marina Kai River Coral Pearl Morgan Dylan Bay Harbor Sailor Moana Oceane Nerissa")),
    ("mountain_community", _names("Aspen Sierra Denver Cliff Rocky Everest Summit Cedar Forest Montana Alpine")),
    ("agricultural_community", _names("Clay Tucker Jed Amos Ruth Clementine Ida Rosie Hank Earl Buck")),
    ("college_community", _names("Oliver Theodore Eleanor Iris Julian Felix Cora Leo Nora Hugo Audrey")),
    ("industrial_community", _names("Frank Joe Walter Ray Stanley Carl Joan Donna Carol Darlene Gary")),
    ("arts_community", _names("Indigo Juniper Wren Sage Lyric Atlas Orion Phoenix Story Poet Jazz")),
    ("international_community", _names("Mateo Sofia Yusuf Priya Wei Kenji Amara Noor Lucas Zara Kiran")),
    ("gated_community", _names("Preston Sterling Whitney Spencer Harrison Winston Caroline Charlotte Genevieve Sebastian")),
    ("walkable_community", _names("Maya Leo Eli Max Ruby Jasper Hazel Milo Ivy Arlo")),
    ("suburban_community", _names("Emily Jessica Ashley Michael Matthew Tyler Megan Brandon Kyle Lauren Josh Nicole")),
)

# --- Gender-neutral names ---

CURATED_NEUTRAL_NAMES = _names("""
    alex avery bailey blake cameron casey charlie dakota dylan elliot emerson finley harley
    harper hayden jamie jordan justice kai kennedy logan morgan parker peyton quinn reese
    riley river rowan ryan sage sam sawyer skylar taylor winter aspen autumn bay brook cedar
    cloud cypress ever fern forest gray grove juniper lake lark leaf maple ocean oakley
    phoenix rain reed robin sequoia sky sparrow storm wren arden ari arrow ashton august
    atlas blair bodhi campbell carter chandler corey cruz dallas devin drew ellis emery ezra
    frankie greer harlow haven hollis indiana indigo jaden joss jules kendall lane lennon
    london luca marley micah milan monroe navy nico noa noel onyx paxton presley remi rory
    scout shiloh spencer stevie sydney tatum tennessee toby andy billie bobby chris dani
    gene jackie jesse jo joey lee lou max nicky pat ronnie shay terry val angel blessing
    chance destiny eden faith fortune freedom genesis grace harbor harmony honor hope
    journey joy legacy liberty love loyal mercy miracle noble pace peace promise reason
    royal true truth unique unity valentine valor wisdom amal ariel azariah darcy erin gale
    glenn isa jody kiran leslie lynn mischa noor pearse rene sacha sasha shannon shea sidney
    simone sloan sutton tai tommie tracy vivian addison anderson archer ashby barclay
    barrett beckett bennett bentley billings blaine brooks bryant camden carson cassidy
    clayton collins cooper cory dalton davis dawson devon donovan edison ellery emory flynn
    garrison hadley harrison hudson hunter jackson jameson jensen keegan kelly kelsey
    kingsley landry lennox lincoln mackenzie madison maddox mason mckenzie murphy palmer
    payton perry preston raleigh reagan remy ripley rowen rylan sailor salem shelby
    sheridan skyler sterling sullivan tanner teagan tyler weston whitney wiley wyatt
    artemis bellamy bronte cody fitzgerald holden ira kerry kit lindsay marlow merritt
    orion poet porter reilly rhodes story wylie
""")

# --- Embedded fallback table used when no source loads ---

FALLBACK_NAMES: Tuple[Tuple[str, str, int], ...] = (
    ("Olivia", "F", 1000),
    ("Emma", "F", 950),
    ("Charlotte", "F", 900),
    ("Amelia", "F", 850),
    ("Sophia", "F", 800),
    ("Liam", "M", 1000),
    ("Noah", "M", 950),
    ("Oliver", "M", 900),
    ("James", "M", 850),
    ("Elijah", "M", 800),
)
